"""Module update command for Kyber Tools."""

import click
from click.core import ParameterSource

from kyber_tools.cli.helpers import configure_logging, exit_with_error, get_docker_service
from kyber_tools.core.constants import DEFAULT_MODULE_FILE, KYBER_DOWNLOAD_URL
from kyber_tools.core.module_updater import ModuleUpdater
from kyber_tools.core.preflight import verify_container
from kyber_tools.services.exceptions import DockerServiceError, ServiceError


@click.command(context_settings={
    'help_option_names': ['-h', '--help'],
    'allow_extra_args': True,
})
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose mode')
@click.option('-c', 'container_name', help='Specify a docker container name')
@click.option('-f', 'file_name', default=DEFAULT_MODULE_FILE, show_default=True,
              help='Specify input file')
@click.option('-d', 'download', is_flag=True,
              help=f'Download latest {DEFAULT_MODULE_FILE} instead of using a local file')
@click.option('--url', 'download_url', envvar='KYBER_DOWNLOAD_URL', default=KYBER_DOWNLOAD_URL,
              show_default=True, help='Where -d downloads the module from')
@click.pass_context
def update(ctx, verbose, container_name, file_name, download, download_url):
    """Replace a Kyber module file in a server container and restart it.

    The current file is kept inside the container as <name>.old.
    """
    configure_logging(verbose)

    if not container_name:
        click.echo("Error: A Docker container name must be provided using -c", err=True)
        click.echo("See --help for proper usage", err=True)
        ctx.exit(1)

    if ctx.args:
        exit_with_error("Too many arguments. See --help for proper usage")

    docker_service = get_docker_service()

    try:
        verify_container(docker_service, container_name, require_running=False)
    except DockerServiceError as e:
        exit_with_error(str(e))

    explicit = ctx.get_parameter_source('file_name') == ParameterSource.COMMANDLINE
    updater = ModuleUpdater(docker_service, download_url=download_url)

    try:
        source = updater.resolve_source(file_name, explicit=explicit, download=download)
        installed = updater.install(container_name, source)
    except ServiceError as e:
        exit_with_error(str(e))

    click.echo(f"The new {installed} has been successfully added to the specified container")
    click.echo("The docker container has been restarted and is ready for use")
