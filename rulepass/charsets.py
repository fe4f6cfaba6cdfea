"""
rulepass.charsets
Built-in character classes.
"""

from typing import Dict

NUMBERS = "0123456789"
LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SPECIAL = "!@#$%^&*()`=+-_"

# names accepted by the CLI and the settings file
NAMED_CLASSES: Dict[str, str] = {
    "numbers": NUMBERS,
    "lower": LOWER,
    "upper": UPPER,
    "special": SPECIAL,
}


def resolve_class(name: str) -> str:
    """Look up a built-in class by name (case-insensitive)."""
    try:
        return NAMED_CLASSES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(NAMED_CLASSES))
        raise ValueError(f"unknown character class '{name}' (expected one of: {known})") from None
