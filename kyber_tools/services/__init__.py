"""Service layer for abstracting Docker and download operations."""

from .docker_service import DockerService
from .download_service import DownloadService
from .exceptions import (
    ServiceError,
    DockerServiceError,
    DockerNotInstalledError,
    ContainerNotFoundError,
    ContainerNotRunningError,
    DownloadError,
    HostPathError,
    HostFileNotFoundError,
    ValidationError,
    SelectionError,
    DisallowedFileError,
    InvalidContainerNameError,
)

__all__ = [
    "DockerService",
    "DownloadService",
    "ServiceError",
    "DockerServiceError",
    "DockerNotInstalledError",
    "ContainerNotFoundError",
    "ContainerNotRunningError",
    "DownloadError",
    "HostPathError",
    "HostFileNotFoundError",
    "ValidationError",
    "SelectionError",
    "DisallowedFileError",
    "InvalidContainerNameError",
]
