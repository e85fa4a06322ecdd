"""
Dictionary Similarity Service
Detects passwords that are trivial substitution variants of dictionary words.
"""

import logging
import string
from typing import Iterable, List

logger = logging.getLogger(__name__)

# ASCII case folding plus the look-alike substitutions ($ -> s, 0 -> o, 1 -> l).
# Non-ASCII characters are left untouched.
_FOLD_TABLE = str.maketrans(
    string.ascii_uppercase + "$01",
    string.ascii_lowercase + "sol",
)

DEFAULT_LENGTH_SLACK = 4


def fold(text: str) -> str:
    """Return the canonical comparable form of text."""
    return text.translate(_FOLD_TABLE)


def _is_similar(word: str, password: str, folded_password: str, length_slack: int) -> bool:
    if len(password) > len(word) + length_slack:
        return False
    return fold(word) in folded_password


def similar_to_word(word: str, password: str, length_slack: int = DEFAULT_LENGTH_SLACK) -> bool:
    """
    Check whether the password is too similar to a dictionary word.

    It is too similar when the folded word appears as a contiguous substring
    of the folded password and the password is no more than length_slack
    characters longer than the word. Longer passwords are exempt.

    An empty word is contained in every password.
    """
    return _is_similar(word, password, fold(password), length_slack)


def find_similar_words(
    password: str,
    dictionary: Iterable[str],
    length_slack: int = DEFAULT_LENGTH_SLACK,
) -> List[str]:
    """Return every dictionary word the password is too similar to, in dictionary order."""
    folded_password = fold(password)
    matches = []
    for word in dictionary:
        if not isinstance(word, str):
            logger.warning(f"Skipping non-string dictionary entry of type {type(word).__name__}")
            continue
        if _is_similar(word, password, folded_password, length_slack):
            matches.append(word)
    return matches
