"""
Passcheck
Exports the password policy checks for use by callers.
"""

from passcheck.utils.char_classes import (
    count_uppercase_letters,
    count_lowercase_letters,
    scan_classes,
)
from passcheck.utils.run_length import longest_consecutive_identical_characters
from passcheck.services.similarity import similar_to_word, find_similar_words
from passcheck.services.policy import check_password, evaluate_password, validate_password
from passcheck.schemas.common import PolicyVerdict

__all__ = [
    "count_uppercase_letters",
    "count_lowercase_letters",
    "scan_classes",
    "longest_consecutive_identical_characters",
    "similar_to_word",
    "find_similar_words",
    "check_password",
    "evaluate_password",
    "validate_password",
    "PolicyVerdict",
]
