"""Caption layout arithmetic."""

from __future__ import annotations

from common import config
from common.models import (ImageDimensions, MemeRequest, RenderParameters,
                           TextOffsets)


def calculate_font_size(dimensions: ImageDimensions) -> float:
  """Font size scales with the image width."""
  return dimensions.width / config.FONT_SIZE_DIVISOR


def calculate_text_offsets(
  dimensions: ImageDimensions,
  padding: int = config.TEXT_PADDING,
) -> TextOffsets:
  """Compute the vertical caption offsets from the image center.

  The top offset is always negative (above center) and the bottom offset is
  its mirror below center.
  """
  band = dimensions.height / config.POSITION_TEXT_FACTOR
  return TextOffsets(
    top=-abs(band - padding),
    bottom=band - padding,
  )


def build_render_parameters(
  request: MemeRequest,
  dimensions: ImageDimensions,
  image_path: str,
) -> RenderParameters:
  """Combine the request and probed dimensions into render parameters."""
  offsets = calculate_text_offsets(dimensions, config.TEXT_PADDING)
  return RenderParameters(
    image_path=image_path,
    top_text=request.top_text,
    bottom_text=request.bottom_text or "",
    font_size=calculate_font_size(dimensions),
    top_offset=offsets.top,
    bottom_offset=offsets.bottom,
    font=config.get_font(),
  )
