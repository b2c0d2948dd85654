"""Kyber Tools - Manage Kyber dedicated servers running in Docker."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
