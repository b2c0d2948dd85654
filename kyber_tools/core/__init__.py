"""Core functionality for Kyber Tools."""

from .selection import parse_selection
from .whitelist import NameWhitelist

__all__ = [
    'parse_selection',
    'NameWhitelist',
]
