"""
RulePass: random passwords checked against composable rules.
"""

from .charsets import LOWER, NUMBERS, SPECIAL, UPPER
from .errors import ConfigurationError, IterationsExhausted, PasswordError, RandomSourceError
from .generator import SecureRandomSource, generate_password
from .options import (
    GenerationConfig,
    build_config,
    custom_verifier,
    include_class,
    include_custom,
    include_lowercase,
    include_numbers,
    include_special,
    include_uppercase,
    no_adjacent_repeats,
    retry_budget,
)
from .verifiers import excluding

__all__ = [
    "NUMBERS",
    "LOWER",
    "UPPER",
    "SPECIAL",
    "PasswordError",
    "ConfigurationError",
    "IterationsExhausted",
    "RandomSourceError",
    "SecureRandomSource",
    "generate_password",
    "GenerationConfig",
    "build_config",
    "include_class",
    "include_numbers",
    "include_lowercase",
    "include_uppercase",
    "include_special",
    "include_custom",
    "no_adjacent_repeats",
    "custom_verifier",
    "retry_budget",
    "excluding",
]
