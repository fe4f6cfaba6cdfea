"""
rulepass.verifiers

Predicates a finished candidate must satisfy to be accepted.
Each takes the whole password and returns True to accept it.
"""

from typing import Callable

Verifier = Callable[[str], bool]


def no_adjacent_repeats(password: str) -> bool:
    """False if any two consecutive characters are equal ("aa", "$$")."""
    for i in range(1, len(password)):
        if password[i] == password[i - 1]:
            return False
    return True


def excluding(chars: str) -> Verifier:
    """
    Build a verifier rejecting any password that contains one of `chars`.
    Handy when a target system refuses a few symbols, e.g. excluding("$").
    """
    forbidden = frozenset(chars)

    def verify(password: str) -> bool:
        return not any(c in forbidden for c in password)

    return verify
