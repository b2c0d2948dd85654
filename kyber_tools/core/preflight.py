"""Ordered checks run before touching a container."""

from ..services.docker_service import DockerService
from ..services.exceptions import (
    ContainerNotFoundError,
    ContainerNotRunningError,
    DockerNotInstalledError,
)


def ensure_runtime_available(docker_service: DockerService) -> None:
    """Raise DockerNotInstalledError unless the docker binary is on PATH."""
    if not docker_service.runtime_available():
        raise DockerNotInstalledError("Docker is not installed or not in PATH")


def verify_container(
    docker_service: DockerService, container_name: str, require_running: bool = True
) -> None:
    """Check that a container exists and, optionally, that it is running.

    Existence is checked first: inspecting an unknown container is a docker
    error, not a stopped container.

    Raises:
        ContainerNotFoundError: If no container has that name
        ContainerNotRunningError: If the container is stopped and must run
        DockerServiceError: If docker cannot be queried
    """
    if not docker_service.container_exists(container_name):
        raise ContainerNotFoundError(f"Container '{container_name}' does not exist")

    if require_running and not docker_service.container_running(container_name):
        raise ContainerNotRunningError(
            f"Container '{container_name}' exists but is not running.\n"
            f"Start it with: docker start {container_name}"
        )
