"""
Password Policy Service
Checks candidate passwords against the institutional password rules:

- 8 to 32 characters long
- at least one uppercase letter, one lowercase letter and one non-letter
- no leading or trailing space
- no more than two consecutive identical characters
- not a (substitution) variant of a dictionary word
- no carriage return, line feed, '/' or '\\', and no trailing '*'
"""

import logging
from typing import Iterable, List, Optional

from passcheck.config import PolicySettings, get_settings
from passcheck.schemas.common import PolicyVerdict
from passcheck.services.similarity import find_similar_words
from passcheck.utils.char_classes import scan_classes
from passcheck.utils.run_length import longest_consecutive_identical_characters

logger = logging.getLogger(__name__)

_CHARACTER_NAMES = {
    "\r": "a carriage return",
    "\n": "a line feed",
    "/": "'/'",
    "\\": "'\\'",
}


def _describe(ch: str) -> str:
    return _CHARACTER_NAMES.get(ch, repr(ch))


def _collect(
    password: str,
    dictionary: Iterable[str],
    settings: PolicySettings,
):
    errors: List[str] = []

    if not settings.min_length <= len(password) <= settings.max_length:
        errors.append(
            f"Password must be between {settings.min_length} and "
            f"{settings.max_length} characters long"
        )

    if password.startswith(" ") or password.endswith(" "):
        errors.append("Password must not begin or end with a space")

    longest_run = longest_consecutive_identical_characters(password)
    if longest_run > settings.max_consecutive_identical:
        errors.append(
            f"Password must not contain more than {settings.max_consecutive_identical} "
            "consecutive identical characters"
        )

    similar = find_similar_words(password, dictionary, settings.similarity_length_slack)
    if similar:
        names = ", ".join(repr(word) for word in similar)
        errors.append(f"Password is too similar to a dictionary word: {names}")

    classes = scan_classes(password)
    if not classes.has_lowercase:
        errors.append("Password must include a lowercase letter")
    if not classes.has_uppercase:
        errors.append("Password must include an uppercase letter")
    if not classes.has_non_letter:
        errors.append("Password must include a number or symbol")

    for ch in settings.forbidden_characters:
        if ch in password:
            errors.append(f"Password must not contain {_describe(ch)}")

    if settings.forbidden_trailing and password.endswith(tuple(settings.forbidden_trailing)):
        errors.append(f"Password must not end with {password[-1]!r}")

    logger.debug(
        f"Checked password of length {len(password)}: longest run {longest_run}, "
        f"{len(similar)} similar word(s), {len(errors)} violation(s)"
    )
    return errors, similar


def validate_password(
    password: str,
    dictionary: Optional[Iterable[str]] = (),
    settings: Optional[PolicySettings] = None,
) -> List[str]:
    """
    Validate password against the policy and return a list of errors.

    Every rule is evaluated; an empty list means the password is acceptable.
    """
    return evaluate_password(password, dictionary, settings).violations


def evaluate_password(
    password: str,
    dictionary: Optional[Iterable[str]] = (),
    settings: Optional[PolicySettings] = None,
) -> PolicyVerdict:
    """Validate password and return the full verdict, including matched dictionary words."""
    if not isinstance(password, str):
        logger.warning("Password check called without a password")
        return PolicyVerdict(acceptable=False, violations=["Password is required"])
    if dictionary is None:
        logger.warning("Password check called without a dictionary")
        return PolicyVerdict(acceptable=False, violations=["Dictionary is required"])

    errors, similar = _collect(password, dictionary, settings or get_settings())
    return PolicyVerdict(acceptable=not errors, violations=errors, similar_words=similar)


def check_password(
    password: str,
    dictionary: Optional[Iterable[str]] = (),
    settings: Optional[PolicySettings] = None,
) -> bool:
    """Check whether password is acceptable under the policy."""
    return evaluate_password(password, dictionary, settings).acceptable
