"""Operations for building captioned meme images."""

from __future__ import annotations

import base64
import os

from common import config, meme_layout, utils
from common.models import MemeRequest
from firebase_functions import logger
from services import graphicsmagick, image_download

MEME_HTML_TEMPLATE = '<img src="data:image/jpeg;base64,{data}"/>'


def encode_base64(path: str) -> str:
  """Read a file and return its contents as a base64 string.

  Raises:
    OSError: If the file is missing, unreadable or empty.
  """
  with open(path, "rb") as file_handle:
    content = file_handle.read()
  if not content:
    raise OSError(f"Rendered image {path} is empty")
  return base64.b64encode(content).decode("ascii")


def remove_files(*paths: str) -> None:
  """Delete each path, ignoring files that were never created.

  Failures are logged and never raised, so cleanup cannot mask the result of
  the request.
  """
  for path in paths:
    try:
      os.remove(path)
    except FileNotFoundError:
      continue
    except OSError as e:
      logger.warn(f"Failed to remove temp file {path}: {e}")


def create_meme(request: MemeRequest) -> str:
  """Run the full caption pipeline for a validated request.

  Returns:
    The rendered image, base64 encoded.
  """
  image_path = utils.new_temp_path(f"-in{config.OUTPUT_EXTENSION}")
  processed_image_path = utils.new_temp_path(f"-out{config.OUTPUT_EXTENSION}")

  try:
    logger.info('Downloading image...')
    image_download.download_image(request.image_url, image_path)

    logger.info('Getting image size...')
    dimensions = graphicsmagick.get_image_size(image_path)
    params = meme_layout.build_render_parameters(request, dimensions,
                                                 image_path)

    logger.info('Generating meme image...')
    graphicsmagick.draw_captions(params, processed_image_path)

    logger.info('Generating base64...')
    return encode_base64(processed_image_path)
  finally:
    logger.info('Finishing...')
    remove_files(image_path, processed_image_path)


def render_meme_html(image_base64: str) -> str:
  """Embed a base64 image in the response HTML."""
  return MEME_HTML_TEMPLATE.format(data=image_base64)
