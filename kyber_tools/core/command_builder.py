"""Assembly of the ``docker run`` command that launches a Kyber server."""

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

from ..models.server import ServerConfig
from ..services.exceptions import DockerServiceError, HostPathError
from .constants import (
    DEFAULT_MODULE_CHANNEL,
    ENV_KYBER_TOKEN,
    ENV_MAP_ROTATION,
    ENV_MAX_PLAYERS,
    ENV_MAXIMA_CREDENTIALS,
    ENV_MOD_FOLDER,
    ENV_MODULE_CHANNEL,
    ENV_PLUGINS_PATH,
    ENV_SERVER_DESCRIPTION,
    ENV_SERVER_NAME,
    ENV_SERVER_PASSWORD,
    EXECUTABLE_MODE,
    GAME_DATA_MOUNT,
    KYBER_SERVER_IMAGE,
    MOD_FOLDER_MOUNT,
    PLUGIN_FOLDER_MOUNT,
    SAVED_COMMAND_MODE,
)

logger = logging.getLogger(__name__)


def quote(value: str) -> str:
    """Wrap ``value`` in double quotes, escaping embedded double quotes."""
    return '"' + value.replace('"', '\\"') + '"'


class LaunchCommandBuilder:
    """Builds a single shell command line from a ServerConfig.

    The builder is pure: it never runs, saves or prints anything.
    """

    def __init__(
        self,
        image: str = KYBER_SERVER_IMAGE,
        default_module_channel: str = DEFAULT_MODULE_CHANNEL,
    ):
        self.image = image
        self.default_module_channel = default_module_channel

    def build(self, cfg: ServerConfig) -> str:
        parts = ["docker run -it"]

        parts.extend(["--name", cfg.container_name])

        if cfg.restart_unless_stopped:
            parts.append("--restart=unless-stopped")

        credentials = f"{cfg.maxima_email}:{cfg.maxima_password}"
        parts.extend([
            f"-e {ENV_MAXIMA_CREDENTIALS}={quote(credentials)}",
            f"-e {ENV_KYBER_TOKEN}={cfg.kyber_token}",
            f"-e {ENV_SERVER_NAME}={quote(cfg.server_name)}",
            f"-e {ENV_MAX_PLAYERS}={cfg.max_players}",
            f"-e {ENV_MAP_ROTATION}={quote(cfg.map_rotation)}",
        ])

        if cfg.module_channel != self.default_module_channel:
            parts.append(f"-e {ENV_MODULE_CHANNEL}={cfg.module_channel}")

        if cfg.server_description:
            parts.append(f"-e {ENV_SERVER_DESCRIPTION}={quote(cfg.server_description)}")

        if cfg.server_password:
            parts.append(f"-e {ENV_SERVER_PASSWORD}={quote(cfg.server_password)}")

        parts.append(f"-v {quote(f'{cfg.game_data_path}:{GAME_DATA_MOUNT}')}")

        if cfg.mod_folder_path:
            parts.extend([
                f"-v {quote(cfg.mod_folder_path)}:{MOD_FOLDER_MOUNT}",
                f"-e {ENV_MOD_FOLDER}={MOD_FOLDER_MOUNT}",
            ])

        if cfg.plugin_folder_path:
            parts.extend([
                f"-v {quote(cfg.plugin_folder_path)}:{PLUGIN_FOLDER_MOUNT}",
                f"-e {ENV_PLUGINS_PATH}={PLUGIN_FOLDER_MOUNT}",
            ])

        parts.append(self.image)

        return " ".join(parts)


@dataclass(frozen=True)
class LaunchCommand:
    """A built launch command and the side effects that consume it."""

    command: str

    def __str__(self) -> str:
        return self.command

    def run(self) -> None:
        """Run the command through ``/bin/sh`` attached to this terminal.

        Raises:
            DockerServiceError: If the shell cannot be started or the command fails
        """
        logger.debug(f"Running: {self.command}")
        try:
            subprocess.run(["/bin/sh", "-c", self.command], check=True)
        except subprocess.CalledProcessError as e:
            raise DockerServiceError(
                f"docker run exited with status {e.returncode}"
            ) from e
        except OSError as e:
            raise DockerServiceError(f"Unexpected error running docker command: {e}") from e

    def save(self, path: Path) -> Path:
        """Write the command to ``path`` as a one line script and mark it executable.

        Raises:
            HostPathError: If the file cannot be written
        """
        try:
            path.touch(mode=SAVED_COMMAND_MODE)
            path.write_text(self.command + "\n")
            os.chmod(path, EXECUTABLE_MODE)
        except OSError as e:
            raise HostPathError(f"Failed to save file: {e}") from e
        logger.info(f"Saved launch command to {path}")
        return path
