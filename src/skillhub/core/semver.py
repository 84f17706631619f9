"""
Strict three-part version strings: validation and ordering.
"""

import re
from functools import cmp_to_key
from typing import Any, Iterable, List, Tuple


STRICT_SEMVER_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")
_SEGMENT_PATTERN = re.compile(r"[0-9]+")


class InvalidVersionError(ValueError):
    """Raised when a version cannot be split into three integer segments."""


def validate_semver(version: Any) -> bool:
    """Return True iff ``version`` is exactly ``major.minor.patch`` digits."""
    if not isinstance(version, str):
        return False
    return STRICT_SEMVER_PATTERN.fullmatch(version) is not None


def _parse_segments(version: str) -> Tuple[int, int, int]:
    parts = str(version).split(".")
    if len(parts) < 3:
        raise InvalidVersionError(f"Version {version!r} has fewer than three segments")
    segments = []
    for part in parts[:3]:
        if not _SEGMENT_PATTERN.fullmatch(part):
            raise InvalidVersionError(f"Version {version!r} has a non-numeric segment {part!r}")
        segments.append(int(part))
    return segments[0], segments[1], segments[2]


def compare_semver(a: str, b: str) -> int:
    """
    Compare two versions by major, then minor, then patch.

    Only the first three segments are compared. Inputs are not required to be
    strict semver; call ``validate_semver`` first where that matters.

    Returns:
        1 if a > b, -1 if a < b, 0 if equal

    Raises:
        InvalidVersionError: if either version lacks three integer segments
    """
    pa = _parse_segments(a)
    pb = _parse_segments(b)
    for x, y in zip(pa, pb):
        if x > y:
            return 1
        if x < y:
            return -1
    return 0


def sort_versions(versions: Iterable[str], reverse: bool = False) -> List[str]:
    """Sort versions in ascending order (descending with ``reverse``)."""
    return sorted(versions, key=cmp_to_key(compare_semver), reverse=reverse)
