"""Whitelist of module files that may be pushed into a server container."""

from pathlib import PurePath
from typing import Iterable

from .constants import ALLOWED_MODULE_FILES


class NameWhitelist:
    """Case-insensitive allow list keyed on a file's base name."""

    def __init__(self, allowed: Iterable[str] = ALLOWED_MODULE_FILES):
        self.allowed = frozenset(name.lower() for name in allowed)

    @staticmethod
    def base_name(path: str) -> str:
        """Strip directory components from ``path``."""
        return PurePath(path).name

    def check_allowed(self, path: str) -> bool:
        """Check if the base name of ``path`` is on the allow list."""
        return self.base_name(path).lower() in self.allowed
