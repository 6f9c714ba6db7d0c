"""Version ordering for engine software versions."""

import re
from typing import Tuple

_LEADING_VERSION = re.compile(r"^\s*v?(\d+(?:\.\d+)*)")


def parse_version(version: str) -> Tuple[int, ...]:
    """
    Extract the leading dotted-numeric token as a tuple of ints.
    
    "0.7.1-beta commit=v0.7.1-beta-rc1" -> (0, 7, 1)
    """
    if not isinstance(version, str):
        raise ValueError(f"Version must be a string, got {version!r}")
    
    match = _LEADING_VERSION.match(version)
    if not match:
        raise ValueError(f"Unrecognized version string: {version!r}")
    
    return tuple(int(part) for part in match.group(1).split("."))


def at_least(candidate: str, minimum: str) -> bool:
    """Return True if candidate is the same as or newer than minimum."""
    left = parse_version(candidate)
    right = parse_version(minimum)
    
    width = max(len(left), len(right))
    left = left + (0,) * (width - len(left))
    right = right + (0,) * (width - len(right))
    
    return left >= right
