"""
rulepass.options

Options builder. Each helper returns a mutator that edits a GenerationConfig;
mutators are applied in the order given, and only ever append (except
retry_budget, which replaces the budget). Nothing is validated here:
generate_password checks the resolved config before the first attempt.
"""

from dataclasses import dataclass, field
from typing import Callable, List

from .charsets import LOWER, NUMBERS, SPECIAL, UPPER
from . import verifiers as _verifiers
from .verifiers import Verifier

DEFAULT_MAX_ATTEMPTS = 50


@dataclass
class GenerationConfig:
    length: int
    classes: List[str] = field(default_factory=list)
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    verifiers: List[Verifier] = field(default_factory=list)


Mutator = Callable[[GenerationConfig], None]


def build_config(length: int, *mutators: Mutator) -> GenerationConfig:
    cfg = GenerationConfig(length=length)
    for mutate in mutators:
        mutate(cfg)
    return cfg


def include_class(chars: str) -> Mutator:
    def mutate(cfg: GenerationConfig) -> None:
        cfg.classes.append(chars)
    return mutate


def include_numbers() -> Mutator:
    return include_class(NUMBERS)


def include_lowercase() -> Mutator:
    return include_class(LOWER)


def include_uppercase() -> Mutator:
    return include_class(UPPER)


def include_special() -> Mutator:
    return include_class(SPECIAL)


def include_custom(chars: str) -> Mutator:
    """
    Add a caller-supplied set, e.g. a restricted symbol list like "!#%".
    Duplicates are kept and make those characters more likely.
    """
    return include_class(str(chars))


def no_adjacent_repeats() -> Mutator:
    return custom_verifier(_verifiers.no_adjacent_repeats)


def custom_verifier(verifier: Verifier) -> Mutator:
    def mutate(cfg: GenerationConfig) -> None:
        cfg.verifiers.append(verifier)
    return mutate


def retry_budget(attempts: int) -> Mutator:
    """Number of generate-and-verify attempts before giving up (default 50)."""
    def mutate(cfg: GenerationConfig) -> None:
        cfg.max_attempts = attempts
    return mutate
