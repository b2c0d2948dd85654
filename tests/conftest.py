import subprocess

import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from kyber_tools.services.docker_service import DockerService


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def mock_docker_service():
    """Provides a mocked DockerService for a running container."""
    service = MagicMock(spec=DockerService)
    service.runtime_available.return_value = True
    service.container_exists.return_value = True
    service.container_running.return_value = True
    service.exec_in_container.return_value = ""
    return service


@pytest.fixture
def log_files():
    """Five log file names in listing order."""
    return ["a.log", "b.log", "c.log", "d.log", "e.log"]


@pytest.fixture
def server_config_kwargs():
    """Minimal valid answers for a ServerConfig."""
    return {
        "container_name": "kyber1",
        "maxima_email": "player@example.com",
        "maxima_password": "hunter2",
        "kyber_token": "tok123",
        "server_name": "My Server",
        "max_players": 40,
        "map_rotation": "QUJD",
        "game_data_path": "/srv/battlefront",
    }


@pytest.fixture
def completed():
    """Builds CompletedProcess results the way subprocess.run returns them."""
    def _completed(args, stdout="", returncode=0, stderr=""):
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)
    return _completed
