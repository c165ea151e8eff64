"""Utility functions"""

import os
import tempfile


def new_temp_path(suffix: str = "") -> str:
  """Creates an empty scratch file and returns its path.

  `mkstemp` reserves the name atomically, so concurrent requests never share
  a file. The caller owns the file and must remove it.
  """
  fd, path = tempfile.mkstemp(suffix=suffix)
  os.close(fd)
  return path


def is_emulator() -> bool:
  """Returns True if the code is running in an emulator."""
  return bool(os.environ.get('FUNCTIONS_EMULATOR'))


def is_local() -> bool:
  """Returns True if error details may be exposed in responses."""
  return is_emulator() or bool(os.environ.get('IS_LOCAL'))
