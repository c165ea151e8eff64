"""Tests for the image_download module."""

from unittest.mock import MagicMock, patch

import pytest
import requests
from services import image_download


def test_download_image_writes_bytes(tmp_path):
  response = MagicMock()
  response.content = b"\x89PNG fake bytes"
  path = str(tmp_path / "in.png")

  with patch.object(image_download.requests, "get",
                    return_value=response) as mock_get:
    result = image_download.download_image("https://example.com/cat.png",
                                           path)

  assert result == path
  with open(path, "rb") as f:
    assert f.read() == b"\x89PNG fake bytes"
  mock_get.assert_called_once()
  assert mock_get.call_args.kwargs["timeout"] > 0


def test_download_image_http_error_raises_fetch_error(tmp_path):
  response = MagicMock()
  response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
  path = tmp_path / "in.png"

  with patch.object(image_download.requests, "get", return_value=response):
    with pytest.raises(image_download.FetchError, match="404"):
      image_download.download_image("https://example.com/missing.png",
                                    str(path))

  assert not path.exists()


def test_download_image_timeout_raises_fetch_error(tmp_path):
  path = tmp_path / "in.png"

  with patch.object(image_download.requests,
                    "get",
                    side_effect=requests.Timeout("read timed out")):
    with pytest.raises(image_download.FetchError, match="timed out"):
      image_download.download_image("https://example.com/slow.png", str(path))

  assert not path.exists()
