"""Utility functions for Telldus Live.

This module contains helper functions used across the application:
- to_int: Lenient integer coercion for API values
- statevalue_to_level / level_to_statevalue: Convert between 0-255 and 0-100 scales
- parse_level_change: Parse the dim command's [+|-]amount argument
- similarity_score: Fuzzy string matching for command suggestions
"""

import math
import re

from core.errors import ArgumentError

MAX_STATEVALUE = 255
MAX_LEVEL = 100

LEVEL_CHANGE_PATTERN = re.compile(r'([+-]?)([0-9]+)')
ID_PATTERN = re.compile(r'[0-9]+')
_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def to_int(value) -> int:
    """Read the leading integer of a value, as the API sends numbers as strings.

    Returns 0 for None or values without a leading integer.
    """
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _LEADING_INT.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else 0


def statevalue_to_level(statevalue) -> int:
    """Convert a raw 0-255 statevalue to a 0-100 dim level (rounded down)."""
    level = math.floor(to_int(statevalue) / MAX_STATEVALUE * MAX_LEVEL)
    return min(max(level, 0), MAX_LEVEL)


def level_to_statevalue(level: int) -> int:
    """Convert a 0-100 dim level to the 0-255 value sent to the API.

    Out of range levels are clamped, not rejected.
    """
    raw = math.floor(level / MAX_LEVEL * MAX_STATEVALUE)
    return min(max(raw, 0), MAX_STATEVALUE)


def parse_level_change(text: str) -> tuple[str, int]:
    """Parse a dim argument such as '40', '+5' or '-10'.

    Returns:
        Tuple of (sign, amount) where sign is '', '+' or '-'

    Raises:
        ArgumentError: If the text is not an optionally signed integer
    """
    match = LEVEL_CHANGE_PATTERN.fullmatch(text)
    if not match:
        raise ArgumentError(f"Could not parse new level: {text}")
    return match.group(1), int(match.group(2))


def similarity_score(s1: str, s2: str) -> int:
    """Calculate similarity score between two strings.

    Returns:
        Similarity score:
        - 100: Exact match (case-insensitive)
        - 80: Prefix match
        - 60: Substring match
        - 21-50: Character sequence match (proportional to matching characters)
        - 0: No match
    """
    s1_lower = s1.lower()
    s2_lower = s2.lower()

    if s1_lower == s2_lower:
        return 100

    if s2_lower.startswith(s1_lower) or s1_lower.startswith(s2_lower):
        return 80

    if s1_lower in s2_lower or s2_lower in s1_lower:
        return 60

    # Characters of s1 found in order within s2
    matches = 0
    j = 0
    for char in s1_lower:
        while j < len(s2_lower):
            j += 1
            if s2_lower[j - 1] == char:
                matches += 1
                break

    if matches > 0:
        score = int((matches / max(len(s1_lower), len(s2_lower))) * 50)
        return score if score > 20 else 0

    return 0
