"""Kyber dedicated server launch models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..core.constants import CONTAINER_NAME_CHARS, DEFAULT_MODULE_CHANNEL
from ..services.exceptions import InvalidContainerNameError


def container_name_problem(name: str) -> Optional[str]:
    """Return why ``name`` cannot be used for a new container, or None if it can."""
    if not name:
        return "Container name is required."
    if " " in name:
        return "Container name cannot contain spaces. Use '-', '_', or '.' instead."
    if any(char not in CONTAINER_NAME_CHARS for char in name):
        return (
            "Container name must be lowercase and may only contain "
            "a-z, 0-9, '-', '_' and '.'"
        )
    return None


def validate_container_name(name: str) -> str:
    """Return ``name`` unchanged if it can name a new container.

    Raises:
        InvalidContainerNameError: If the name is empty or has a character
            docker would reject
    """
    problem = container_name_problem(name)
    if problem:
        raise InvalidContainerNameError(problem)
    return name


class ServerConfig(BaseModel):
    """Answers collected for one ``docker run`` of the Kyber server image."""
    container_name: str
    maxima_email: str = Field(min_length=1)
    maxima_password: str = Field(min_length=1)
    kyber_token: str = Field(min_length=1)
    server_name: str = Field(min_length=1)
    max_players: int = Field(gt=0)
    map_rotation: str = Field(min_length=1)
    game_data_path: str = Field(min_length=1)
    server_description: str = ""
    server_password: str = ""
    module_channel: str = DEFAULT_MODULE_CHANNEL
    mod_folder_path: str = ""
    plugin_folder_path: str = ""
    restart_unless_stopped: bool = False

    @field_validator("container_name")
    @classmethod
    def _check_container_name(cls, value: str) -> str:
        return validate_container_name(value)


class LaunchAction(Enum):
    """What to do with a built launch command."""
    RUN = "1"
    SAVE = "2"
    RUN_AND_SAVE = "3"
    PRINT = "4"

    @property
    def label(self) -> str:
        return {
            LaunchAction.RUN: "Run the command",
            LaunchAction.SAVE: "Save the command to a file",
            LaunchAction.RUN_AND_SAVE: "Run the command and save it to a file",
            LaunchAction.PRINT: "Print the command only",
        }[self]

    @property
    def saves(self) -> bool:
        return self in (LaunchAction.SAVE, LaunchAction.RUN_AND_SAVE)

    @property
    def runs(self) -> bool:
        return self in (LaunchAction.RUN, LaunchAction.RUN_AND_SAVE)

    @classmethod
    def from_choice(cls, choice: str) -> Optional["LaunchAction"]:
        """Map a menu answer such as ``"3"`` to an action, None if unknown."""
        try:
            return cls(choice.strip())
        except ValueError:
            return None
