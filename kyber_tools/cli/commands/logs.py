"""Log extraction command for Kyber Tools."""

from pathlib import Path

import click

from kyber_tools.cli.helpers import (
    configure_logging,
    exit_with_error,
    format_file_table,
    get_docker_service,
    prompt_optional,
)
from kyber_tools.core.log_extractor import LogExtractor
from kyber_tools.core.preflight import verify_container
from kyber_tools.core.selection import parse_selection
from kyber_tools.services.exceptions import (
    DockerServiceError,
    HostPathError,
    SelectionError,
)


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('-v', '--verbose', is_flag=True, help='Show docker commands as they run')
@click.option('-c', '--container', 'container_name', help='Docker container name (prompted if omitted)')
def logs(verbose, container_name):
    """Copy Kyber log files out of a running server container.

    Lists the *.log files in the container's Kyber log directory and asks
    which to extract, e.g. "1", "1-3" or "1-3,5".
    """
    configure_logging(verbose)
    docker_service = get_docker_service()

    if not container_name:
        container_name = prompt_optional("Enter container name")
    if not container_name:
        exit_with_error("Container name cannot be empty")

    try:
        verify_container(docker_service, container_name, require_running=True)
    except DockerServiceError as e:
        exit_with_error(str(e))

    extractor = LogExtractor(docker_service)
    try:
        log_files = extractor.list_logs(container_name)
    except DockerServiceError as e:
        exit_with_error(f"Failed to list log files: {e}")

    if not log_files:
        click.echo("No .log files found in container.")
        return

    click.echo("\nLog files found:")
    click.echo(format_file_table(log_files, header="Log file"))

    while True:
        selection = prompt_optional("\nSelect log files to extract (e.g. 1, 1-3, 1-3,5)")
        try:
            selected = parse_selection(selection, log_files)
            break
        except SelectionError as e:
            click.echo(f"Invalid selection: {e}")

    dest = prompt_optional("\nDestination directory (leave empty for current directory)")
    destination = Path(dest) if dest else Path.cwd()

    try:
        results = extractor.extract(container_name, selected, destination)
    except HostPathError as e:
        exit_with_error(str(e))

    for result in results:
        if result.ok:
            click.echo(f"Copied {result.name}")
        else:
            click.echo(f"Failed to copy {result.name}: {result.error}", err=True)

    click.echo("\nDone.")
