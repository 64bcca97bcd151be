"""
Generate Thumbnail Cloud Function

Generates a YouTube thumbnail image for a topic and title using the AI
gateway's image model.

Expected JSON input:
    {"topic": "home espresso on a budget", "title": "I Tried $50 Espresso 😱"}

"title" is optional and defaults to the topic.

Success:
    {"imageUrl": "https://..."}

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
from viral_studio.thumbnail_utils import extract_image_url


@functions_framework.http
def generate_thumbnail(request):
    """Main Cloud Function entry point."""
    # Handle CORS preflight
    if request.method == 'OPTIONS':
        return preflight_response()

    try:
        request_json = read_json_body(request)
        topic = require_text_field(request_json, 'topic')

        title = request_json.get('title')
        if not isinstance(title, str) or not title.strip():
            title = topic
        title = title.strip()

        api_key = gateway.get_api_key()

        print(f"Generating thumbnail for topic: {topic} title: {title}")
        data = gateway.request_thumbnail(topic, title, api_key=api_key)
        image_url = extract_image_url(data)

        return json_response({'imageUrl': image_url})

    except Exception as e:
        return error_response(e, 'generate-thumbnail')
