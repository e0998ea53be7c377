"""
Small string conveniences.
"""

from typing import Callable, Dict, Iterable, Optional, Tuple


def replacing_occurrences(text: str, mapping: Dict[str, str]) -> str:
    """Replace each character found in mapping with its mapped character."""
    return ''.join(mapping.get(c, c) for c in text)


def appending(text: str, other: Optional[str]) -> str:
    return text + (other or '')


def non_empty(text: Optional[str]) -> Optional[str]:
    """Return text, or None if it is empty."""
    return text if text else None


def join_optional(parts: Iterable[Optional[str]], separator: str = ' ') -> Optional[str]:
    """
    Join the parts that are not None.

    Args:
        parts: Strings to join; None entries are skipped
        separator: Placed between joined parts

    Returns:
        Joined string, or None if nothing was joined
    """
    present = [p for p in parts if p is not None]
    if not present:
        return None
    return non_empty(separator.join(present))


def drop_last(text: str) -> str:
    return text[:-1]


def dropping_first(text: str) -> str:
    return text[1:]


def replace_at_index(text: str, index: int, char: str) -> str:
    """Replace the character at index; out-of-range indices leave text unchanged."""
    if not 0 <= index < len(text):
        return text
    return text[:index] + char + text[index + 1:]


def range_distance_of_string(text: str, sub: str) -> Optional[Tuple[int, int]]:
    """Half-open (start, end) of the first occurrence of sub, or None."""
    start = text.find(sub)
    if start < 0:
        return None
    return start, start + len(sub)


def distance_to_character(text: str, char: str) -> Optional[int]:
    index = text.find(char)
    return index if index >= 0 else None


def distance_to(text: str, predicate: Callable[[str], bool]) -> Optional[int]:
    """Index of the first character satisfying predicate, or None."""
    for distance, c in enumerate(text):
        if predicate(c):
            return distance
    return None


def as_string(value) -> str:
    return f"{value}"
