"""
Generate Title Cloud Function

Turns a video topic into up to 5 viral YouTube titles using the AI gateway.

Expected JSON input:
    {"topic": "home espresso on a budget"}

Success:
    {"titles": ["...", "..."]}

Error:
    {"error": "..."} with status 400, 402, 429 or 500
"""

import functions_framework
import os
import sys

# Add shared module to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from viral_studio import gateway
from viral_studio.http_utils import (
    error_response,
    json_response,
    preflight_response,
    read_json_body,
    require_text_field,
)
from viral_studio.title_utils import parse_titles


@functions_framework.http
def generate_title(request):
    """Main Cloud Function entry point."""
    # Handle CORS preflight
    if request.method == 'OPTIONS':
        return preflight_response()

    try:
        request_json = read_json_body(request)
        topic = require_text_field(request_json, 'topic')

        # Fail before calling upstream if the key is missing
        api_key = gateway.get_api_key()

        print(f"Generating viral titles for topic: {topic}")
        content = gateway.request_titles(topic, api_key=api_key)
        titles = parse_titles(content)

        return json_response({'titles': titles})

    except Exception as e:
        return error_response(e, 'generate-title')
