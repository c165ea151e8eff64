"""Meme generation cloud functions."""

import traceback

import pydantic
from common import meme_operations
from common.models import MemeRequest
from firebase_functions import https_fn, logger, options
from functions.function_utils import (error_response, get_params,
                                      handle_cors_preflight,
                                      handle_health_check, html_response,
                                      internal_error_response)

MEME_PARAMS = ('image', 'topText', 'bottomText')


def _format_validation_error(error: pydantic.ValidationError) -> str:
  """Summarize validation failures as `field: message` pairs."""
  parts = []
  for detail in error.errors():
    field = ".".join(str(loc) for loc in detail.get('loc', ())) or "request"
    parts.append(f"{field}: {detail.get('msg')}")
  return "; ".join(parts)


@https_fn.on_request(
  memory=options.MemoryOption.GB_1,
  timeout_sec=60,
)
def mememaker(req: https_fn.Request) -> https_fn.Response:
  """Caption an image and return it inline as a base64 data URI."""
  if response := handle_cors_preflight(req):
    return response

  if response := handle_health_check(req):
    return response

  if req.method not in ['GET', 'POST']:
    return error_response(f'Method not allowed: {req.method}',
                          req=req,
                          status=405)

  try:
    meme_request = MemeRequest.model_validate(get_params(req, *MEME_PARAMS))
  except pydantic.ValidationError as e:
    return error_response(_format_validation_error(e), req=req, status=400)

  try:
    image_base64 = meme_operations.create_meme(meme_request)
  except Exception as e:  # pylint: disable=broad-except
    stacktrace = traceback.format_exc()
    logger.error(f"Meme generation failed: {e}\n{stacktrace}")
    return internal_error_response(stacktrace, req=req)

  return html_response(meme_operations.render_meme_html(image_base64),
                       req=req,
                       status=200)
