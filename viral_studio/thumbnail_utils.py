"""Extract the generated thumbnail URL from an image-model response."""

import json

from .errors import NoImageError
from .gateway import first_message


def extract_image_url(data: dict) -> str:
    """
    Read choices[0].message.images[0].image_url.url.

    Raises NoImageError if any part of that path is missing or empty.
    """
    images = first_message(data).get('images')
    url = None
    if isinstance(images, list) and images and isinstance(images[0], dict):
        image_url = images[0].get('image_url')
        if isinstance(image_url, dict):
            url = image_url.get('url')

    if not isinstance(url, str) or not url.strip():
        print(f"No image in response: {json.dumps(data)[:1000]}")
        raise NoImageError()

    return url
