"""Download service for fetching remote module assets."""

import logging
from pathlib import Path
from typing import Optional

import requests

from .exceptions import DownloadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


class DownloadService:
    """Fetches a single URL into a local file."""

    def __init__(self, timeout: Optional[float] = None):
        """Initialize download service.

        Args:
            timeout: Request timeout in seconds, None waits indefinitely
        """
        self.timeout = timeout

    def download(self, url: str, destination: Path) -> Path:
        """Stream the body of a GET request to ``destination``.

        Args:
            url: Remote asset URL
            destination: Local file path, overwritten if present

        Returns:
            The destination path

        Raises:
            DownloadError: On transport failure, a non-200 status, or a write error
        """
        logger.info(f"Downloading {url} to {destination}")
        try:
            with requests.get(url, stream=True, timeout=self.timeout) as response:
                if response.status_code != requests.codes.ok:
                    raise DownloadError(
                        f"download failed: {response.status_code} {response.reason}"
                    )
                with open(destination, "wb") as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
        except requests.RequestException as e:
            raise DownloadError(f"download failed: {e}") from e
        except OSError as e:
            raise DownloadError(f"could not write {destination}: {e}") from e

        return destination
