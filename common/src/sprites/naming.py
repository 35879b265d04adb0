"""
Name-based sprite classification.

Asset names are the only metadata available for loosely organised art packs,
so every heuristic in the resolver and selector goes through these helpers.
All comparisons are case-insensitive.
"""

import re
from typing import Iterable, List, Sequence

from .enums import BAD_SHEET_TOKENS
from .frames import Frame

_SEGMENT_SPLIT = re.compile(r"[_\-\.\s]+")


def is_bad_sheet(name: str) -> bool:
    """
    Check whether a name marks a composite or reference sheet.

    Args:
        name: Asset name.

    Returns:
        True if the lowercased name contains "full", "sheet" or "reference".
    """
    lowered = name.lower()
    return any(token in lowered for token in BAD_SHEET_TOKENS)


def contains_any(name: str, tokens: Iterable[str]) -> bool:
    """Case-insensitive substring test of name against each token."""
    lowered = name.lower()
    return any(token.lower() in lowered for token in tokens)


def name_segments(name: str) -> List[str]:
    """Split a name into lowercase segments on _, -, . and whitespace."""
    return [segment for segment in _SEGMENT_SPLIT.split(name.lower()) if segment]


def has_token(name: str, tokens: Iterable[str]) -> bool:
    """
    Token test used for direction matching.

    Multi-character tokens match as substrings, exactly like contains_any().
    Single-character tokens ("s", "e", "n", "w") must be a whole segment of
    the name, otherwise "e" would match every name containing the letter e.

    Args:
        name: Asset or frame name.
        tokens: Candidate tokens.

    Returns:
        True if any token matches.
    """
    lowered = name.lower()
    segments = None
    for token in tokens:
        token = token.lower()
        if len(token) > 1:
            if token in lowered:
                return True
            continue
        if segments is None:
            segments = name_segments(lowered)
        if token in segments:
            return True
    return False


def trailing_number(name: str) -> int:
    """
    Parse the run of decimal digits at the end of a name.

    Args:
        name: Asset or frame name, e.g. "mage_walk_south_03".

    Returns:
        The trailing number, or 0 when the name does not end in a digit.
    """
    end = len(name)
    start = end
    while start > 0 and name[start - 1] in "0123456789":
        start -= 1
    if start == end:
        return 0
    return int(name[start:end])


def sort_by_trailing_number(frames: Sequence[Frame]) -> List[Frame]:
    """Stable sort of frames by the trailing number in their names."""
    return sorted(frames, key=lambda frame: trailing_number(frame.name))
