"""Cloud Functions entry point."""

import logging

from functions import meme_fns

# Configure basic logging for the application (primarily for emulator visibility)
logging.basicConfig(level=logging.INFO)

# Export the meme functions
mememaker = meme_fns.mememaker
