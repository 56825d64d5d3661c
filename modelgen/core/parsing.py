"""Parsers for the free-form strings found on architectural plans."""

from __future__ import annotations
import re

_NUMBER = r"(\d+(?:\.\d+)?)"
_DIMENSION_PAIR = re.compile(_NUMBER + r"\s*['’]?\s*[x×]\s*" + _NUMBER, re.IGNORECASE)
_ANY_NUMBER = re.compile(_NUMBER)
_VAULTED = re.compile(r"vaulted|cathedral", re.IGNORECASE)


def parse_dimensions(text: str | None) -> tuple[float, float] | None:
    """Parse "24' x 18'" → (24.0, 18.0).

    Falls back to the first two numbers anywhere in the string. Returns
    None when no usable positive pair is found.
    """
    if not text:
        return None
    match = _DIMENSION_PAIR.search(text)
    if match:
        width, depth = float(match.group(1)), float(match.group(2))
    else:
        numbers = _ANY_NUMBER.findall(text)
        if len(numbers) < 2:
            return None
        width, depth = float(numbers[0]), float(numbers[1])
    if width <= 0 or depth <= 0:
        return None
    return width, depth


def parse_ceiling_height(text: str | None, vaulted_height: float = 17.0) -> float | None:
    """Parse a ceiling-height note.

    An explicit number wins ("Vaulted to 18'" → 18). A bare "vaulted" or
    "cathedral" maps to `vaulted_height`.
    """
    if not text:
        return None
    match = _ANY_NUMBER.search(text)
    if match and float(match.group(1)) > 0:
        return float(match.group(1))
    if _VAULTED.search(text):
        return vaulted_height
    return None


def has_feature(features: tuple[str, ...] | list[str], pattern: str) -> bool:
    """Case-insensitive regex search across feature tags."""
    regex = re.compile(pattern, re.IGNORECASE)
    return any(regex.search(f) for f in features)
