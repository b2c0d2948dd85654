"""Parsing of numeric selection expressions such as ``1-3,5``."""

import re
from typing import Sequence, TypeVar

from ..services.exceptions import SelectionError

T = TypeVar("T")

_INDEX_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_index(text: str) -> int:
    """Parse a plain decimal integer, raising ValueError otherwise."""
    text = text.strip()
    if not _INDEX_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def parse_selection(expr: str, items: Sequence[T]) -> list[T]:
    """Resolve a selection expression against an ordered list of items.

    ``expr`` is a comma separated list of 1-based indices (``3``) and inclusive
    ranges (``1-3``). Indices already selected by an earlier token are skipped,
    so the result keeps the order in which each index first appears.

    Args:
        expr: Selection expression typed by the user
        items: Items in listing order

    Returns:
        Selected items, deduplicated, in first-appearance order

    Raises:
        SelectionError: If any token is malformed or out of range; nothing is
            returned in that case
    """
    seen: set[int] = set()
    selected: list[T] = []

    for part in expr.split(","):
        part = part.strip()

        if "-" in part:
            bounds = part.split("-")
            if len(bounds) != 2:
                raise SelectionError(f"invalid range: {part}")
            try:
                start = _parse_index(bounds[0])
                end = _parse_index(bounds[1])
            except ValueError as e:
                raise SelectionError(f"invalid range: {part}") from e
            if start < 1 or end > len(items) or start > end:
                raise SelectionError(f"invalid range: {part}")
            indices = range(start, end + 1)
        else:
            try:
                index = _parse_index(part)
            except ValueError as e:
                raise SelectionError(f"invalid number: {part}") from e
            if index < 1 or index > len(items):
                raise SelectionError(f"invalid number: {part}")
            indices = range(index, index + 1)

        for index in indices:
            if index not in seen:
                seen.add(index)
                selected.append(items[index - 1])

    return selected
