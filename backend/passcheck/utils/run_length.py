"""
Run Length Utilities
Measures runs of consecutive identical characters.
"""

from itertools import groupby
from typing import List


def run_lengths(password: str) -> List[int]:
    """
    Lengths of the maximal runs of identical characters, left to right.

    The lengths always sum to len(password). Comparison is case-sensitive.
    """
    return [sum(1 for _ in group) for _, group in groupby(password)]


def longest_consecutive_identical_characters(password: str) -> int:
    """Length of the longest run; 0 for an empty password."""
    return max(run_lengths(password), default=0)
