"""
Title processing utilities for Viral Studio.

The title model is asked for a JSON array of 5 strings, but it does not
always comply. Parsing is best-effort and never raises:
1. Strip a surrounding markdown code fence
2. Parse as a JSON array of strings
3. Otherwise fall back to the first 5 non-empty lines
"""

import json
import re
from typing import List, Optional

# Maximum number of titles returned to the caller
MAX_TITLES = 5

_FENCE_OPEN = re.compile(r'^```(?:json)?[ \t]*\n?', re.IGNORECASE)
_FENCE_CLOSE = re.compile(r'\n?```$')


def strip_code_fence(content: str) -> str:
    """
    Remove a markdown code fence around the content.

    Examples:
        >>> strip_code_fence('```json\\n["a"]\\n```')
        '["a"]'

        >>> strip_code_fence('["a"]')
        '["a"]'
    """
    cleaned = content.strip()
    if not cleaned.startswith('```'):
        return cleaned
    cleaned = _FENCE_OPEN.sub('', cleaned, count=1)
    cleaned = _FENCE_CLOSE.sub('', cleaned, count=1)
    return cleaned.strip()


def parse_json_titles(content: str) -> Optional[List[str]]:
    """Parse content as a JSON array of strings. Returns None if it isn't one."""
    try:
        parsed = json.loads(strip_code_fence(content))
    except (ValueError, RecursionError) as e:
        print(f"Failed to parse titles: {type(e).__name__}: {str(e)[:200]}")
        return None

    if not isinstance(parsed, list):
        print(f"Failed to parse titles: expected a JSON array, got {type(parsed).__name__}")
        return None
    if not all(isinstance(item, str) for item in parsed):
        print("Failed to parse titles: JSON array contains non-string items")
        return None
    return parsed[:MAX_TITLES]


def split_title_lines(content: str, limit: int = MAX_TITLES) -> List[str]:
    """Take the first `limit` non-empty lines of freeform text."""
    lines = [line.strip() for line in content.split('\n')]
    return [line for line in lines if line][:limit]


def parse_titles(content: Optional[str]) -> List[str]:
    """
    Normalize the title model's text content into at most 5 titles.

    Args:
        content: Raw message content from the completion response

    Returns:
        Ordered list of 0-5 titles
    """
    if not content or not content.strip():
        return []

    titles = parse_json_titles(content)
    if titles is not None:
        return titles

    print("Falling back to line split for titles")
    return split_title_lines(content)
