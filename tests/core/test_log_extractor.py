"""Tests for log listing and extraction."""

from pathlib import Path
from unittest.mock import patch

import pytest

from kyber_tools.core.constants import CONTAINER_LOG_PATH
from kyber_tools.core.log_extractor import LogExtractor
from kyber_tools.core.preflight import verify_container
from kyber_tools.core.selection import parse_selection
from kyber_tools.services.docker_service import DockerService
from kyber_tools.services.exceptions import DockerServiceError, HostPathError


class TestLogExtractor:
    """Test suite for LogExtractor."""

    def test_list_logs_strips_paths(self, mock_docker_service):
        mock_docker_service.exec_in_container.return_value = (
            f"{CONTAINER_LOG_PATH}/server.log\n{CONTAINER_LOG_PATH}/crash.log\n"
        )

        files = LogExtractor(mock_docker_service).list_logs("kyber1")

        assert files == ["server.log", "crash.log"]
        mock_docker_service.exec_in_container.assert_called_once_with(
            "kyber1", f"ls -1 {CONTAINER_LOG_PATH}/*.log 2>/dev/null || true"
        )

    def test_list_logs_empty(self, mock_docker_service):
        mock_docker_service.exec_in_container.return_value = "\n"
        assert LogExtractor(mock_docker_service).list_logs("kyber1") == []

    def test_extract_creates_destination(self, mock_docker_service, tmp_path):
        destination = tmp_path / "out" / "logs"

        results = LogExtractor(mock_docker_service).extract("kyber1", ["a.log"], destination)

        assert destination.is_dir()
        assert [r.ok for r in results] == [True]
        mock_docker_service.copy_from_container.assert_called_once_with(
            "kyber1", f"{CONTAINER_LOG_PATH}/a.log", destination / "a.log"
        )

    def test_extract_continues_after_failed_copy(self, mock_docker_service, tmp_path):
        mock_docker_service.copy_from_container.side_effect = [
            None,
            DockerServiceError("no such file"),
            None,
        ]

        results = LogExtractor(mock_docker_service).extract(
            "kyber1", ["a.log", "b.log", "c.log"], tmp_path
        )

        assert [r.name for r in results] == ["a.log", "b.log", "c.log"]
        assert [r.ok for r in results] == [True, False, True]
        assert "no such file" in results[1].error
        assert mock_docker_service.copy_from_container.call_count == 3

    def test_destination_failure_aborts_before_copy(self, mock_docker_service, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with pytest.raises(HostPathError, match="Failed to create destination directory"):
            LogExtractor(mock_docker_service).extract("kyber1", ["a.log"], blocker / "logs")

        mock_docker_service.copy_from_container.assert_not_called()


class TestLogExtractionScenario:
    """Runs the whole extraction flow against a scripted docker CLI."""

    @patch('kyber_tools.services.docker_service.subprocess.run')
    def test_selected_logs_copied_in_order(self, mock_run, completed, tmp_path):
        def fake_docker(cmd, **kwargs):
            args = cmd[1:]
            if args[:2] == ["ps", "-a"]:
                return completed(cmd, stdout="other\nkyber1\n")
            if args[0] == "inspect":
                return completed(cmd, stdout="true\n")
            if args[0] == "exec":
                return completed(cmd, stdout="\n".join(
                    f"{CONTAINER_LOG_PATH}/{name}" for name in ("a.log", "b.log", "c.log")
                ))
            return completed(cmd)

        mock_run.side_effect = fake_docker
        docker_service = DockerService()
        destination = tmp_path / "extracted"

        verify_container(docker_service, "kyber1")
        extractor = LogExtractor(docker_service)
        files = extractor.list_logs("kyber1")
        selected = parse_selection("1,3", files)
        results = extractor.extract("kyber1", selected, destination)

        assert destination.is_dir()
        assert all(r.ok for r in results)
        copies = [call.args[0] for call in mock_run.call_args_list if call.args[0][1] == "cp"]
        assert copies == [
            ["docker", "cp", f"kyber1:{CONTAINER_LOG_PATH}/a.log", str(Path(destination) / "a.log")],
            ["docker", "cp", f"kyber1:{CONTAINER_LOG_PATH}/c.log", str(Path(destination) / "c.log")],
        ]
