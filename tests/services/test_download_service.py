"""Tests for download service."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from kyber_tools.services.download_service import DownloadService
from kyber_tools.services.exceptions import DownloadError


def _response(status_code=200, reason="OK", chunks=(b"MZ", b"", b"\x90\x00")):
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.iter_content.return_value = iter(chunks)
    response.__enter__.return_value = response
    return response


class TestDownloadService:
    """Test cases for DownloadService."""

    @patch('kyber_tools.services.download_service.requests.get')
    def test_download_streams_body(self, mock_get, tmp_path):
        mock_get.return_value = _response()
        destination = tmp_path / "Kyber.dll"

        result = DownloadService().download("https://example.com/Kyber.dll", destination)

        assert result == destination
        assert destination.read_bytes() == b"MZ\x90\x00"
        mock_get.assert_called_once_with(
            "https://example.com/Kyber.dll", stream=True, timeout=None
        )

    @patch('kyber_tools.services.download_service.requests.get')
    def test_non_200_status(self, mock_get, tmp_path):
        mock_get.return_value = _response(status_code=404, reason="Not Found")
        destination = tmp_path / "Kyber.dll"

        with pytest.raises(DownloadError, match="404 Not Found"):
            DownloadService().download("https://example.com/Kyber.dll", destination)

        assert not destination.exists()

    @patch('kyber_tools.services.download_service.requests.get')
    def test_transport_error(self, mock_get, tmp_path):
        mock_get.side_effect = requests.ConnectionError("no route to host")

        with pytest.raises(DownloadError, match="no route to host"):
            DownloadService().download("https://example.com/Kyber.dll", tmp_path / "k.dll")

    @patch('kyber_tools.services.download_service.requests.get')
    def test_write_error(self, mock_get, tmp_path):
        mock_get.return_value = _response()

        with pytest.raises(DownloadError, match="could not write"):
            DownloadService().download("https://example.com/Kyber.dll", tmp_path / "no" / "k.dll")

    @patch('kyber_tools.services.download_service.requests.get')
    def test_timeout_passed_through(self, mock_get, tmp_path):
        mock_get.return_value = _response()

        DownloadService(timeout=30).download("https://example.com/a", tmp_path / "a")

        assert mock_get.call_args.kwargs["timeout"] == 30
