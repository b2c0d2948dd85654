"""Models for Kyber Tools."""

from .server import (
    LaunchAction,
    ServerConfig,
    container_name_problem,
    validate_container_name,
)

__all__ = [
    'LaunchAction',
    'ServerConfig',
    'container_name_problem',
    'validate_container_name',
]
