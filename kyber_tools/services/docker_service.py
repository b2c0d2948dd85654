"""Docker service wrapping the docker command line client."""

import logging
import shutil
import subprocess
from pathlib import Path

from ..core.constants import DOCKER_EXECUTABLE
from .exceptions import DockerServiceError

logger = logging.getLogger(__name__)


class DockerService:
    """Service for Docker operations with clean abstractions.

    Every operation shells out to the docker CLI and blocks until it exits.
    """

    def __init__(self, executable: str = DOCKER_EXECUTABLE):
        """Initialize Docker service.

        Args:
            executable: Name or path of the docker client binary
        """
        self.executable = executable

    def runtime_available(self) -> bool:
        """Check if the docker executable resolves on PATH."""
        return shutil.which(self.executable) is not None

    def _run_docker_command(self, args: list[str]) -> subprocess.CompletedProcess:
        """Run a docker command with proper error handling.

        Args:
            args: Docker command arguments

        Returns:
            Completed process result

        Raises:
            DockerServiceError: If the command cannot be run or exits non-zero
        """
        cmd = [self.executable] + args
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            return subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else str(e)
            raise DockerServiceError(f"Docker command failed: {error_msg}") from e
        except OSError as e:
            raise DockerServiceError(f"Unexpected error running docker command: {e}") from e

    def container_exists(self, container_name: str) -> bool:
        """Check if a container with this exact name exists, running or not.

        Args:
            container_name: Declared container name

        Returns:
            True if a container with that name is known to docker

        Raises:
            DockerServiceError: If the container listing fails
        """
        return container_name in self.list_container_names(include_stopped=True)

    def container_running(self, container_name: str) -> bool:
        """Check if a container is running.

        An unknown container is an error here, not a False result.

        Raises:
            DockerServiceError: If docker cannot inspect the container
        """
        result = self._run_docker_command(
            ["inspect", "-f", "{{.State.Running}}", container_name]
        )
        return result.stdout.strip() == "true"

    def exec_in_container(
        self, container_name: str, command: str, shell: str = "sh"
    ) -> str:
        """Execute a shell command in a running container.

        Args:
            container_name: Container name
            command: Command line handed to ``<shell> -c``
            shell: Shell binary inside the container

        Returns:
            Captured stdout

        Raises:
            DockerServiceError: If execution fails
        """
        result = self._run_docker_command(
            ["exec", container_name, shell, "-c", command]
        )
        return result.stdout

    def copy_from_container(
        self, container_name: str, src_path: str, dst_path: Path
    ) -> None:
        """Copy a file out of a container onto the host.

        Raises:
            DockerServiceError: If copy fails
        """
        self._run_docker_command(["cp", f"{container_name}:{src_path}", str(dst_path)])
        logger.info(f"Copied {container_name}:{src_path} to {dst_path}")

    def copy_to_container(
        self, src_path: Path, container_name: str, dst_path: str
    ) -> None:
        """Copy a host file into a container.

        Raises:
            DockerServiceError: If copy fails
        """
        self._run_docker_command(["cp", str(src_path), f"{container_name}:{dst_path}"])
        logger.info(f"Copied {src_path} to {container_name}:{dst_path}")

    def restart_container(self, container_name: str) -> None:
        """Restart a container.

        Raises:
            DockerServiceError: If restart fails
        """
        self._run_docker_command(["restart", container_name])
        logger.info(f"Restarted container: {container_name}")

    def list_container_names(self, include_stopped: bool = True) -> list[str]:
        """List container names.

        Args:
            include_stopped: Include stopped containers

        Raises:
            DockerServiceError: If listing fails
        """
        args = ["ps", "--format", "{{.Names}}"]
        if include_stopped:
            args.insert(1, "-a")
        result = self._run_docker_command(args)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]
