"""
Character Class Utilities
Counts and detects ASCII letter classes in a password.
"""

from typing import NamedTuple


class CharacterClasses(NamedTuple):
    has_uppercase: bool
    has_lowercase: bool
    has_non_letter: bool


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def count_uppercase_letters(password: str) -> int:
    """Count the characters in A-Z."""
    return sum(1 for ch in password if _is_upper(ch))


def count_lowercase_letters(password: str) -> int:
    """Count the characters in a-z."""
    return sum(1 for ch in password if _is_lower(ch))


def has_uppercase(password: str) -> bool:
    return any(_is_upper(ch) for ch in password)


def has_lowercase(password: str) -> bool:
    return any(_is_lower(ch) for ch in password)


def has_non_letter(password: str) -> bool:
    """True if any character is outside both A-Z and a-z (digits, symbols, space, non-ASCII)."""
    return any(not (_is_upper(ch) or _is_lower(ch)) for ch in password)


def scan_classes(password: str) -> CharacterClasses:
    """
    Scan the password once and report which classes it covers.

    Only ASCII letters count as letters; anything else, including
    accented or other non-ASCII letters, is a non-letter.
    """
    upper = lower = other = False
    for ch in password:
        if _is_upper(ch):
            upper = True
        elif _is_lower(ch):
            lower = True
        else:
            other = True
        if upper and lower and other:
            break
    return CharacterClasses(upper, lower, other)
