"""Global configuration constants."""

import os

_RESOURCES_DIR = os.path.join(
  os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
  "resources",
)

# GraphicsMagick
GM_BINARY = os.environ.get("GM_BINARY", "gm")
COMMAND_TIMEOUT_SEC = 30

# Image download
FETCH_TIMEOUT_SEC = 10

# Caption rendering
FONT_PATH = os.environ.get("MEME_FONT_PATH",
                           os.path.join(_RESOURCES_DIR, "impact.ttf"))
# Built-in GraphicsMagick font used when FONT_PATH is not installed
FALLBACK_FONT = "Helvetica-Bold"
FONT_FILL = "#FFF"
STROKE_COLOR = "#000"
STROKE_WEIGHT = 1
TEXT_GRAVITY = "center"
TEXT_PADDING = 40
FONT_SIZE_DIVISOR = 12

# Empirical constant controlling the height of the caption bands
POSITION_TEXT_FACTOR = 2.1

# Request validation
MAX_CAPTION_LENGTH = 200

# Rendered images are written as PNG, but served under the JPEG data URI
OUTPUT_EXTENSION = ".png"


def get_font() -> str:
  """Returns the caption font file, or the built-in fallback if it is missing."""
  if os.path.isfile(FONT_PATH):
    return FONT_PATH
  return FALLBACK_FONT
