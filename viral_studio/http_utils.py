"""
HTTP helpers shared by the Cloud Function entry points.

Responses are Flask-style (body, status, headers) tuples.
"""

import json
import traceback

from .errors import InvalidRequestError, ViralStudioError

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
}

PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
    'Access-Control-Max-Age': '3600',
}


def preflight_response():
    """Empty answer to a CORS preflight request."""
    return ('', 204, dict(PREFLIGHT_HEADERS))


def json_response(payload: dict, status: int = 200):
    headers = {**CORS_HEADERS, 'Content-Type': 'application/json'}
    return (json.dumps(payload), status, headers)


def error_response(error: Exception, function_name: str):
    """Log the error and convert it to a JSON {"error": ...} response."""
    if isinstance(error, ViralStudioError):
        print(f"Error in {function_name}: {error.message}")
        return json_response({'error': error.message}, error.status_code)

    print(f"Error in {function_name}: {error}\n{traceback.format_exc()}")
    return json_response({'error': str(error) or 'Unknown error'}, 500)


def read_json_body(request) -> dict:
    """Decode the request body as a JSON object."""
    request_json = request.get_json(silent=True)
    if not isinstance(request_json, dict):
        raise InvalidRequestError('Request body must be a JSON object')
    return request_json


def require_text_field(request_json: dict, field: str) -> str:
    """Return a non-blank string field, or raise InvalidRequestError."""
    value = request_json.get(field)
    if not isinstance(value, str) or not value.strip():
        raise InvalidRequestError(f'Missing required field: {field}')
    return value.strip()
