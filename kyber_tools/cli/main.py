"""Main CLI entry point for Kyber Tools."""

import click

from .commands.launch import launch
from .commands.logs import logs
from .commands.update import update


@click.group(context_settings={'help_option_names': ['-h', '--help']})
def cli():
    """Kyber Tools - Manage Kyber dedicated servers running in Docker"""
    pass


# Register commands
cli.add_command(logs)
cli.add_command(update)
cli.add_command(launch)


if __name__ == '__main__':
    cli()
