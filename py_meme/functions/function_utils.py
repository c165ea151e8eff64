"""Utility functions for Cloud Functions."""

from typing import Any

from common import utils
from firebase_functions import https_fn, logger

# CORS constants
_CORS_HEADERS = {
  "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
  "Access-Control-Allow-Headers": "Content-Type",
}


def get_cors_headers(req: https_fn.Request | None) -> dict[str, str]:
  """Return CORS headers for cross-origin callers.

  The meme endpoint is public, so any origin that identifies itself is echoed
  back.
  """
  if not req:
    return {}

  origin = req.headers.get("Origin")
  if origin:
    return {**_CORS_HEADERS, "Access-Control-Allow-Origin": origin.rstrip("/")}
  return {}


def handle_cors_preflight(req: https_fn.Request) -> https_fn.Response | None:
  """Handle OPTIONS requests for CORS preflight."""
  if req.method == "OPTIONS":
    cors_headers = get_cors_headers(req) or _CORS_HEADERS
    return https_fn.Response(
      "",
      status=204,
      headers=cors_headers,
    )
  return None


def handle_health_check(req: https_fn.Request) -> https_fn.Response | None:
  """Handle health check requests."""
  if req.path == "/__/health":
    cors_headers = get_cors_headers(req)
    return https_fn.Response("OK", status=200, headers=cors_headers)
  return None


def error_response(
  message: str,
  *,
  req: https_fn.Request | None = None,
  status: int = 500,
) -> https_fn.Response:
  """Return a plain-text error response with CORS headers."""
  logger.error(f"Error response ({status}): {message}")
  cors_headers = get_cors_headers(req)
  return https_fn.Response(
    message,
    status=status,
    headers=cors_headers,
    mimetype='text/plain',
  )


def internal_error_response(
  stacktrace: str,
  req: https_fn.Request | None = None,
) -> https_fn.Response:
  """Return a 500 response, exposing the stack trace only when running locally."""
  message = stacktrace if utils.is_local() else "Internal server error"
  return error_response(message, req=req, status=500)


def html_response(
  html_content: str,
  req: https_fn.Request | None = None,
  status: int = 200,
) -> https_fn.Response:
  """Return an HTML response with CORS headers."""
  cors_headers = get_cors_headers(req)
  return https_fn.Response(
    html_content,
    status=status,
    headers={'Content-Type': 'text/html', **cors_headers},
  )


def get_param(req: https_fn.Request, param_name: str) -> Any | None:
  """Get a parameter from the request, or None if it is absent.

  JSON requests carry parameters under a `data` object; any other shape of
  body is treated as carrying no parameters.
  """
  if req.is_json:
    json_data = req.get_json()
    data = json_data.get('data') if isinstance(json_data, dict) else None
    if not isinstance(data, dict):
      data = {}
    return data.get(param_name)
  return req.args.get(param_name)


def get_params(req: https_fn.Request, *param_names: str) -> dict[str, Any]:
  """Collect the named parameters that are present on the request."""
  params = {}
  for name in param_names:
    value = get_param(req, name)
    if value is not None:
      params[name] = value
  return params
