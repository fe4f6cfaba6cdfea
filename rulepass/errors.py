"""
rulepass.errors
Exceptions raised by password generation.
"""


class PasswordError(Exception):
    """Base class for every rulepass failure."""


class ConfigurationError(PasswordError, ValueError):
    """The resolved options cannot produce a password (no classes, bad length...)."""


class IterationsExhausted(PasswordError):
    """No candidate passed every verifier within the retry budget."""

    def __init__(self, attempts: int):
        super().__init__("password iterations exhausted")
        self.attempts = attempts


class RandomSourceError(PasswordError):
    """The cryptographic random source failed. Never retried."""
