"""CLI Helper Functions for Kyber Tools.

This module provides reusable helper functions for CLI commands to reduce
code duplication and standardize behavior across all commands.

The helpers provide:
- Logging setup for the ``-v`` flag
- Docker availability checks
- Consistent error reporting and exit codes
- Line based prompts with validation loops
- Table formatting for listings
"""

import logging
import sys
from typing import Callable, NoReturn, Optional, Sequence

import click
from tabulate import tabulate

from kyber_tools.core.constants import LOG_FORMAT
from kyber_tools.core.preflight import ensure_runtime_available
from kyber_tools.models.server import validate_container_name
from kyber_tools.services.docker_service import DockerService
from kyber_tools.services.exceptions import (
    DockerNotInstalledError,
    InvalidContainerNameError,
)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, including docker invocations when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def exit_with_error(message: str) -> NoReturn:
    """Print ``Error: <message>`` on stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def get_docker_service() -> DockerService:
    """Initialize Docker service with error handling.

    Returns:
        DockerService instance

    Note:
        Exits with error message if docker is not on PATH.
    """
    docker_service = DockerService()
    try:
        ensure_runtime_available(docker_service)
    except DockerNotInstalledError as e:
        exit_with_error(str(e))
    return docker_service


def prompt_optional(label: str) -> str:
    """Ask once and return the trimmed answer, possibly empty."""
    return click.prompt(label, default="", show_default=False).strip()


def prompt_validated(label: str, problem: Callable[[str], Optional[str]]) -> str:
    """Ask until ``problem`` returns None for the trimmed answer.

    Args:
        label: Prompt text
        problem: Returns a message describing what is wrong, or None
    """
    while True:
        value = prompt_optional(label)
        message = problem(value)
        if message is None:
            return value
        click.echo(message)


def prompt_required(label: str) -> str:
    """Ask until a non-empty answer is given."""
    return prompt_validated(
        label, lambda value: None if value else "This value is required."
    )


def prompt_container_name(label: str) -> str:
    """Ask until the answer is a valid name for a new container."""
    while True:
        try:
            return validate_container_name(prompt_optional(label))
        except InvalidContainerNameError as e:
            click.echo(str(e))


def prompt_yes_no(label: str) -> bool:
    """Ask until the answer is y, yes, n or no (any case)."""
    while True:
        answer = prompt_optional(label).lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        click.echo("Please enter y or n.")


def format_file_table(files: Sequence[str], header: str = "File") -> str:
    """Format a numbered listing of files, numbered from 1."""
    rows = [(index, name) for index, name in enumerate(files, start=1)]
    return tabulate(rows, headers=["#", header], tablefmt="simple")
