"""Launch command builder for Kyber Tools."""

import sys
from pathlib import Path
from typing import Optional

import click
import questionary
from rich.console import Console

from kyber_tools.cli.helpers import (
    configure_logging,
    exit_with_error,
    get_docker_service,
    prompt_container_name,
    prompt_optional,
    prompt_required,
    prompt_validated,
    prompt_yes_no,
)
from kyber_tools.core.command_builder import LaunchCommand, LaunchCommandBuilder
from kyber_tools.core.constants import DEFAULT_MODULE_CHANNEL, KYBER_SERVER_IMAGE
from kyber_tools.models.server import LaunchAction, ServerConfig
from kyber_tools.services.exceptions import ServiceError


def _max_players_problem(value: str) -> Optional[str]:
    if not value:
        return "This value is required."
    if not value.isdecimal() or int(value) < 1:
        return "Max players must be a positive whole number."
    return None


def prompt_server_config() -> ServerConfig:
    """Collect every launch setting, one prompt at a time."""
    maxima_email = prompt_required("EA account email")
    maxima_password = prompt_required("EA account password")
    kyber_token = prompt_required("Kyber token")
    server_name = prompt_required("Server name")
    server_description = prompt_optional("Server description (optional, leave blank for none)")
    server_password = prompt_optional("Server password (optional, leave blank for none)")
    max_players = int(prompt_validated("Max players", _max_players_problem))
    map_rotation = prompt_required("Map rotation BASE64 string")
    module_channel = prompt_optional(f"Kyber module channel (default: {DEFAULT_MODULE_CHANNEL})")
    game_data_path = prompt_required("Path to game data on host")
    mod_folder_path = prompt_optional("Path to mod folder on host (leave blank if not using mods)")
    plugin_folder_path = prompt_optional(
        "Path to plugin folder on host (leave blank if not using plugins)"
    )
    container_name = prompt_container_name("Docker container name (no spaces, use - or _)")
    restart_unless_stopped = prompt_yes_no(
        "Automatically restart container unless stopped? (y/n)"
    )

    return ServerConfig(
        container_name=container_name,
        maxima_email=maxima_email,
        maxima_password=maxima_password,
        kyber_token=kyber_token,
        server_name=server_name,
        server_description=server_description,
        server_password=server_password,
        max_players=max_players,
        map_rotation=map_rotation,
        module_channel=module_channel or DEFAULT_MODULE_CHANNEL,
        game_data_path=game_data_path,
        mod_folder_path=mod_folder_path,
        plugin_folder_path=plugin_folder_path,
        restart_unless_stopped=restart_unless_stopped,
    )


def prompt_launch_action() -> Optional[LaunchAction]:
    """Ask what to do with the command; None means the answer was not a menu option."""
    if sys.stdin.isatty():
        action = questionary.select(
            "What would you like to do?",
            choices=[questionary.Choice(action.label, value=action) for action in LaunchAction],
        ).ask()
        if action is None:
            raise click.Abort()
        return action

    click.echo("\nWhat would you like to do?")
    for action in LaunchAction:
        click.echo(f"{action.value}) {action.label}")
    return LaunchAction.from_choice(prompt_required("Select an option (1-4)"))


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('-v', '--verbose', is_flag=True, help='Show docker commands as they run')
@click.option('--image', envvar='KYBER_IMAGE', default=KYBER_SERVER_IMAGE, show_default=True,
              help='Kyber server image to run')
def launch(verbose, image):
    """Build the docker run command for a Kyber dedicated server.

    Asks for the server settings, then runs the command, saves it to an
    executable file, does both, or just prints it.
    """
    configure_logging(verbose)
    get_docker_service()

    console = Console()
    console.print("[bold]Kyber Dedicated Server Docker Setup[/bold]")
    console.print("----------------------------------")

    cfg = prompt_server_config()
    launch_command = LaunchCommand(LaunchCommandBuilder(image=image).build(cfg))

    action = prompt_launch_action()
    if action is None:
        exit_with_error("Invalid option.")

    try:
        if action.saves:
            path = Path(prompt_required("Enter file path to save command"))
            launch_command.save(path)
            click.echo(f"Command saved to {path}")

        if action.runs:
            console.print("\n[cyan]Running command...[/cyan]\n")
            launch_command.run()
    except ServiceError as e:
        exit_with_error(str(e))

    if action is LaunchAction.PRINT:
        click.echo("\nDocker command:\n")
        click.echo(str(launch_command))
