"""
rulepass.generator
Rule-checked password generator using Python's secrets module.

generate_password() builds a candidate with at least one character per
configured class, shuffles it, and runs the verifiers against it. A candidate
failing any verifier is thrown away and a fresh one is synthesized, up to the
retry budget. Correctness of the rules is preferred over speed.
"""

import logging
from secrets import SystemRandom, randbelow
from typing import List

from .errors import ConfigurationError, IterationsExhausted, RandomSourceError
from .options import GenerationConfig, Mutator, build_config

logger = logging.getLogger(__name__)


class SecureRandomSource:
    """
    Default randomness provider: OS entropy for both the per-class index draws
    and the final shuffle. Any object with the same two methods can be passed
    to generate_password(source=...).
    """

    def __init__(self):
        self._sysrand = SystemRandom()

    def randbelow(self, n: int) -> int:
        return randbelow(n)

    def shuffle(self, items: List[str]) -> None:
        self._sysrand.shuffle(items)


def validate_config(cfg: GenerationConfig) -> None:
    if not cfg.classes:
        raise ConfigurationError("At least one character class must be configured")
    for i, chars in enumerate(cfg.classes):
        if not chars:
            raise ConfigurationError(f"character class #{i} is empty")
    if cfg.length < 0:
        raise ConfigurationError("length must be >= 0")
    if cfg.max_attempts < 1:
        raise ConfigurationError("retry budget must be at least 1")


def synthesize(cfg: GenerationConfig, source) -> str:
    """
    Produce one shuffled candidate of exactly cfg.length characters.

    Characters are drawn in rounds, one per class in configuration order, and
    the last round is cut off as soon as the length is reached. When length is
    smaller than the number of classes only the first classes get a character.
    """
    out: List[str] = []
    try:
        while len(out) < cfg.length:
            round_chars = [chars[source.randbelow(len(chars))] for chars in cfg.classes]
            for c in round_chars:
                if len(out) == cfg.length:
                    break
                out.append(c)
        source.shuffle(out)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"random source failed: {exc}") from exc
    return "".join(out)


def _passes(candidate: str, cfg: GenerationConfig) -> bool:
    for verify in cfg.verifiers:
        if not verify(candidate):
            logger.debug("candidate rejected by %s", getattr(verify, "__name__", repr(verify)))
            return False
    return True


def generate_password(length: int, *mutators: Mutator, source=None) -> str:
    """
    Generate a password of `length` characters that satisfies every verifier.

    Raises ConfigurationError for an unusable config, IterationsExhausted when
    the retry budget runs out, and RandomSourceError if the entropy source fails.
    """
    cfg = build_config(length, *mutators)
    validate_config(cfg)
    if source is None:
        source = SecureRandomSource()

    for attempt in range(1, cfg.max_attempts + 1):
        try:
            candidate = synthesize(cfg, source)
        except RandomSourceError:
            logger.error("random source failed on attempt %d, aborting", attempt)
            raise
        if _passes(candidate, cfg):
            logger.debug("accepted candidate after %d attempt(s)", attempt)
            return candidate

    logger.warning("no candidate passed %d verifier(s) in %d attempts", len(cfg.verifiers), cfg.max_attempts)
    raise IterationsExhausted(cfg.max_attempts)

