"""Listing and extraction of Kyber log files from a server container."""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional, Sequence

from ..services.docker_service import DockerService
from ..services.exceptions import DockerServiceError, HostPathError
from .constants import CONTAINER_LOG_PATH

logger = logging.getLogger(__name__)


@dataclass
class CopyResult:
    """Outcome of copying one log file to the host."""
    name: str
    destination: Path
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LogExtractor:
    """Finds ``*.log`` files in a container and copies a selection out."""

    def __init__(self, docker_service: DockerService, log_path: str = CONTAINER_LOG_PATH):
        self.docker_service = docker_service
        self.log_path = log_path

    def list_logs(self, container_name: str) -> list[str]:
        """List log file base names in the container, in listing order.

        An empty directory gives an empty list, not an error.

        Raises:
            DockerServiceError: If the listing command cannot be run
        """
        output = self.docker_service.exec_in_container(
            container_name,
            f"ls -1 {self.log_path}/*.log 2>/dev/null || true",
        )
        return [
            PurePosixPath(line).name
            for line in output.strip().splitlines()
            if line.strip()
        ]

    def extract(
        self, container_name: str, files: Sequence[str], destination: Path
    ) -> list[CopyResult]:
        """Copy each selected log file into ``destination``.

        The destination directory is created first; failing that, nothing is
        copied. A failed copy is recorded and the remaining files still run.

        Raises:
            HostPathError: If the destination directory cannot be created
        """
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise HostPathError(f"Failed to create destination directory: {e}") from e

        results = []
        for name in files:
            target = destination / name
            try:
                self.docker_service.copy_from_container(
                    container_name, f"{self.log_path}/{name}", target
                )
            except DockerServiceError as e:
                logger.warning(f"Failed to copy {name}: {e}")
                results.append(CopyResult(name, target, str(e)))
                continue
            results.append(CopyResult(name, target))

        return results
