"""Models for the meme pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from common import config
from pydantic import AnyUrl, BaseModel, ConfigDict, Field


class MemeRequest(BaseModel):
  """Query parameters accepted by the meme endpoint."""

  model_config = ConfigDict(populate_by_name=True)

  image: AnyUrl
  """Absolute URI of the source image."""

  top_text: str = Field(alias="topText",
                        min_length=1,
                        max_length=config.MAX_CAPTION_LENGTH)
  """Caption drawn in the top band."""

  bottom_text: str | None = Field(default=None,
                                  alias="bottomText",
                                  min_length=1,
                                  max_length=config.MAX_CAPTION_LENGTH)
  """Caption drawn in the bottom band, if any."""

  @property
  def image_url(self) -> str:
    """The source image URI as a plain string."""
    return str(self.image)


@dataclass(frozen=True)
class ImageDimensions:
  """Pixel dimensions of a probed image."""

  width: int
  height: int


@dataclass(frozen=True)
class TextOffsets:
  """Vertical caption offsets relative to the gravity anchor."""

  top: float
  bottom: float


@dataclass(frozen=True)
class RenderParameters:
  """Everything the compositor needs to draw both captions."""

  image_path: str
  top_text: str
  bottom_text: str
  font_size: float
  top_offset: float
  bottom_offset: float
  font: str
  fill_color: str = config.FONT_FILL
  stroke_color: str = config.STROKE_COLOR
  stroke_weight: int = config.STROKE_WEIGHT
  gravity: str = config.TEXT_GRAVITY
  padding: int = config.TEXT_PADDING
