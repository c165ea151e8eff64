"""Downloads source images to local scratch files."""

from __future__ import annotations

import requests
from common import config
from firebase_functions import logger


class Error(Exception):
  """Base class for exceptions in this module."""


class FetchError(Error):
  """Exception raised when a remote image cannot be downloaded."""


def download_image(
  url: str,
  path: str,
  timeout_sec: float = config.FETCH_TIMEOUT_SEC,
) -> str:
  """Download the bytes at `url` and write them to `path`.

  The response body is written as-is; the content type is not checked here.
  A non-image body surfaces later when the image is probed.

  Returns:
    The path that was written.
  """
  try:
    response = requests.get(url, timeout=timeout_sec)
    response.raise_for_status()
  except requests.RequestException as e:
    error_msg = f'Error downloading image {url}: {str(e)}'
    logger.error(error_msg)
    raise FetchError(error_msg) from e

  with open(path, "wb") as file_handle:
    file_handle.write(response.content)

  logger.info(f"Downloaded {len(response.content)} bytes from {url} to {path}")
  return path
