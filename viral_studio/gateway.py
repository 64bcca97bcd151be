"""
AI gateway client.

Sends chat-completion requests to the OpenAI-compatible AI gateway and maps
non-2xx answers onto the error taxonomy. No retries; the caller decides.
"""

import os
from typing import List, Optional

import requests

from .errors import (
    ConfigurationError,
    UpstreamError,
    UpstreamQuotaExhausted,
    UpstreamRateLimited,
)
from .prompts import TITLE_SYSTEM_PROMPT, thumbnail_prompt, title_user_prompt

# Configuration
AI_GATEWAY_URL = os.environ.get('AI_GATEWAY_URL', 'https://ai.gateway.lovable.dev/v1/chat/completions')
TITLE_MODEL = os.environ.get('TITLE_MODEL', 'google/gemini-2.5-flash')
THUMBNAIL_MODEL = os.environ.get('THUMBNAIL_MODEL', 'google/gemini-2.5-flash-image-preview')
API_KEY_ENV = 'LOVABLE_API_KEY'


def get_api_key() -> str:
    """Read the gateway API key. Checked on every request, not at import."""
    api_key = os.environ.get(API_KEY_ENV)
    if not api_key:
        raise ConfigurationError(f'{API_KEY_ENV} is not configured')
    return api_key


def get_timeout() -> Optional[float]:
    """Optional request timeout in seconds; None leaves it to the platform."""
    raw = os.environ.get('AI_GATEWAY_TIMEOUT')
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f'AI_GATEWAY_TIMEOUT must be a number, got {raw!r}')


def chat_completion(messages: List[dict], model: str, modalities: Optional[List[str]] = None,
                    api_key: Optional[str] = None) -> dict:
    """
    POST one chat-completion request and return the decoded JSON body.

    Raises:
        ConfigurationError: no API key
        UpstreamRateLimited: gateway answered 429
        UpstreamQuotaExhausted: gateway answered 402
        UpstreamError: any other failure
    """
    api_key = api_key or get_api_key()

    payload = {
        'model': model,
        'messages': messages,
    }
    if modalities:
        payload['modalities'] = modalities

    timeout = get_timeout()
    try:
        response = requests.post(
            AI_GATEWAY_URL,
            headers={
                'Authorization': f'Bearer {api_key}',
                'Content-Type': 'application/json',
            },
            json=payload,
            timeout=timeout,
        )
    except requests.exceptions.Timeout:
        print(f"AI gateway timed out after {timeout}s")
        raise UpstreamError('AI gateway request timed out')
    except requests.exceptions.RequestException as e:
        print(f"AI gateway request failed: {e}")
        raise UpstreamError(f'AI gateway request failed: {e}')

    if not response.ok:
        print(f"AI gateway error: {response.status_code} {response.text[:500]}")
        if response.status_code == 429:
            raise UpstreamRateLimited()
        if response.status_code == 402:
            raise UpstreamQuotaExhausted()
        raise UpstreamError(f'AI gateway error: {response.status_code}',
                            upstream_status=response.status_code)

    try:
        return response.json()
    except ValueError:
        print(f"AI gateway returned non-JSON body: {response.text[:500]}")
        raise UpstreamError('AI gateway returned an invalid response',
                            upstream_status=response.status_code)


def first_message(data: dict) -> dict:
    """Return choices[0].message, or {} if the response has none."""
    if not isinstance(data, dict):
        return {}
    choices = data.get('choices')
    if not isinstance(choices, list) or not choices:
        return {}
    choice = choices[0]
    if not isinstance(choice, dict):
        return {}
    message = choice.get('message')
    return message if isinstance(message, dict) else {}


def request_titles(topic: str, api_key: Optional[str] = None) -> Optional[str]:
    """Ask the title model for 5 titles and return the raw text content."""
    data = chat_completion(
        [
            {'role': 'system', 'content': TITLE_SYSTEM_PROMPT},
            {'role': 'user', 'content': title_user_prompt(topic)},
        ],
        model=TITLE_MODEL,
        api_key=api_key,
    )
    content = first_message(data).get('content')
    print(f"Raw AI response: {content}")
    return content if isinstance(content, str) else None


def request_thumbnail(topic: str, title: str, api_key: Optional[str] = None) -> dict:
    """Ask the image model for a thumbnail and return the full response."""
    data = chat_completion(
        [{'role': 'user', 'content': thumbnail_prompt(topic, title)}],
        model=THUMBNAIL_MODEL,
        modalities=['image', 'text'],
        api_key=api_key,
    )
    print("AI response received")
    return data
