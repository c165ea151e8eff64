"""GraphicsMagick command-line wrapper.

Every command is run as an argument list, never through a shell, so file
paths and caption text cannot inject extra arguments or shell syntax.
"""

from __future__ import annotations

import re
import subprocess

from common import config
from common.models import ImageDimensions, RenderParameters
from firebase_functions import logger

_GEOMETRY_RE = re.compile(r'Geometry:\s*(\S+?)x(\S+?)(?:[+-]|\s|$)')


class Error(Exception):
  """Base class for exceptions in this module."""


class ProbeError(Error):
  """Exception raised when image dimensions cannot be determined."""


class RenderError(Error):
  """Exception raised when drawing captions onto an image fails."""


def _run(args: list[str], error_cls: type[Error]) -> str:
  """Run a gm command and return its stdout, raising `error_cls` on failure."""
  command = [config.GM_BINARY, *args]
  try:
    result = subprocess.run(
      command,
      stdout=subprocess.PIPE,
      stderr=subprocess.PIPE,
      text=True,
      errors="replace",
      check=False,
      timeout=config.COMMAND_TIMEOUT_SEC,
    )
  except subprocess.TimeoutExpired as e:
    raise error_cls(f"{args[0]} timed out after {e.timeout}s") from e
  except OSError as e:
    raise error_cls(f"Could not run {config.GM_BINARY}: {e}") from e

  if result.returncode != 0:
    logger.error(f"gm {args[0]} failed ({result.returncode}): "
                 f"{result.stderr.strip()}")
    raise error_cls(f"{args[0]} exited with status {result.returncode}: "
                    f"{result.stderr.strip()}")
  return result.stdout


def identify_command(image_path: str) -> list[str]:
  """Arguments for a verbose identify of `image_path`."""
  return ["identify", "-verbose", image_path]


def parse_geometry(output: str) -> ImageDimensions:
  """Extract the dimensions from verbose identify output."""
  lines = [line for line in output.strip().splitlines() if "Geometry" in line]
  if not lines:
    raise ProbeError("No Geometry line in identify output")

  match = _GEOMETRY_RE.search(lines[0])
  if not match:
    raise ProbeError(f"Unparseable Geometry line: {lines[0].strip()}")

  try:
    width = int(match.group(1))
    height = int(match.group(2))
  except ValueError as e:
    raise ProbeError(f"Non-numeric geometry: {lines[0].strip()}") from e

  if width <= 0 or height <= 0:
    raise ProbeError(f"Invalid geometry {width}x{height}")
  return ImageDimensions(width=width, height=height)


def get_image_size(image_path: str) -> ImageDimensions:
  """Probe the pixel dimensions of an image file."""
  output = _run(identify_command(image_path), ProbeError)
  return parse_geometry(output)


def escape_draw_text(text: str) -> str:
  """Escape a caption for use inside a double-quoted draw primitive."""
  return text.replace("\\", "\\\\").replace('"', '\\"')


def _draw_directive(gravity: str, offset: float, text: str) -> str:
  return f'gravity {gravity} text 0,{offset} "{escape_draw_text(text)}"'


def convert_command(params: RenderParameters, output_path: str) -> list[str]:
  """Arguments for drawing both captions onto the source image."""
  return [
    "convert",
    params.image_path,
    "-font",
    params.font,
    "-pointsize",
    str(params.font_size),
    "-fill",
    params.fill_color,
    "-stroke",
    params.stroke_color,
    "-strokewidth",
    str(params.stroke_weight),
    "-draw",
    _draw_directive(params.gravity, params.top_offset, params.top_text),
    "-draw",
    _draw_directive(params.gravity, params.bottom_offset, params.bottom_text),
    output_path,
  ]


def draw_captions(params: RenderParameters, output_path: str) -> str:
  """Render the captions into a new file at `output_path`.

  Returns:
    The path of the rendered image.
  """
  _run(convert_command(params, output_path), RenderError)
  return output_path
