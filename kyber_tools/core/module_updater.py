"""Hot swap of a Kyber module file inside a server container."""

import logging
import shlex
from pathlib import Path
from typing import Optional

from ..services.docker_service import DockerService
from ..services.download_service import DownloadService
from ..services.exceptions import (
    DisallowedFileError,
    HostFileNotFoundError,
    ValidationError,
)
from .constants import BACKUP_SUFFIX, CONTAINER_MODULE_PATH, KYBER_DOWNLOAD_URL
from .whitelist import NameWhitelist

logger = logging.getLogger(__name__)


class ModuleUpdater:
    """Replaces a module in a container, keeping the previous copy as ``.old``."""

    def __init__(
        self,
        docker_service: DockerService,
        download_service: Optional[DownloadService] = None,
        whitelist: Optional[NameWhitelist] = None,
        download_url: str = KYBER_DOWNLOAD_URL,
        module_path: str = CONTAINER_MODULE_PATH,
    ):
        self.docker_service = docker_service
        self.download_service = download_service or DownloadService()
        self.whitelist = whitelist or NameWhitelist()
        self.download_url = download_url
        self.module_path = module_path

    def resolve_source(self, file_name: str, explicit: bool, download: bool) -> Path:
        """Work out which host file to push, downloading it if asked to.

        Only an explicitly given file name is checked against the whitelist;
        the default module name is trusted as is.

        Args:
            file_name: Host path of the module file
            explicit: Whether the user supplied ``file_name`` themselves
            download: Fetch the module from ``download_url`` into ``file_name``

        Raises:
            DisallowedFileError: If an explicit file is not whitelisted
            ValidationError: If an explicit file is combined with download
            DownloadError: If the download fails
            HostFileNotFoundError: If the local file is missing
        """
        if explicit and not self.whitelist.check_allowed(file_name):
            raise DisallowedFileError(
                f"invalid file '{self.whitelist.base_name(file_name)}'"
            )

        if download and explicit:
            raise ValidationError("-f and -d cannot be used together, see --help")

        source = Path(file_name)
        if download:
            logger.info(f"Downloading {source.name} from {self.download_url}")
            return self.download_service.download(self.download_url, source)

        if not source.exists():
            raise HostFileNotFoundError(f"Host file '{file_name}' does not exist")
        return source

    def install(self, container_name: str, source: Path) -> str:
        """Back up the module in the container, copy ``source`` in, and restart.

        Each step must succeed before the next one runs. Nothing is rolled back
        on failure.

        Returns:
            The module file name that was installed

        Raises:
            DockerServiceError: From the first failing step
        """
        name = source.name
        target = f"{self.module_path}/{name}"
        backup = f"{target}{BACKUP_SUFFIX}"

        self.docker_service.exec_in_container(
            container_name,
            f"mv {shlex.quote(target)} {shlex.quote(backup)}",
            shell="bash",
        )
        logger.info(f"Moved {target} to {backup}")

        self.docker_service.copy_to_container(source, container_name, target)
        self.docker_service.restart_container(container_name)

        return name
