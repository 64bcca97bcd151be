"""
Generation history client.

Talks to the generation_history table through the database's PostgREST
endpoint (/rest/v1). Row-level security scopes every request to the user
whose access token is forwarded, so the client never filters by user.

Used by the web tool's backend after generate-title and generate-thumbnail
both succeed (save), for the history panel (list_recent) and when the user
removes an entry (delete). The Cloud Functions themselves never persist.
"""

import os
from typing import List, Optional

import requests

from .errors import ConfigurationError, HistoryError
from .title_utils import MAX_TITLES

HISTORY_TABLE = 'generation_history'
DEFAULT_HISTORY_LIMIT = 10


def build_history_record(user_id: str, topic: str, titles: List[str],
                         thumbnail_url: Optional[str]) -> dict:
    """Row for a successful generation. Titles are capped at 5."""
    return {
        'user_id': user_id,
        'topic': topic,
        'titles': list(titles)[:MAX_TITLES],
        'thumbnail_url': thumbnail_url,
    }


class HistoryClient:
    """Insert, list and delete generation_history rows."""

    def __init__(self, base_url: Optional[str] = None, anon_key: Optional[str] = None,
                 timeout: float = 10):
        self.base_url = (base_url or os.environ.get('SUPABASE_URL') or '').rstrip('/')
        self.anon_key = anon_key or os.environ.get('SUPABASE_ANON_KEY')
        self.timeout = timeout

        if not self.base_url:
            raise ConfigurationError('SUPABASE_URL is not configured')
        if not self.anon_key:
            raise ConfigurationError('SUPABASE_ANON_KEY is not configured')

    @property
    def table_url(self) -> str:
        return f"{self.base_url}/rest/v1/{HISTORY_TABLE}"

    def _headers(self, access_token: str) -> dict:
        return {
            'apikey': self.anon_key,
            'Authorization': f'Bearer {access_token}',
            'Content-Type': 'application/json',
        }

    def _request(self, method: str, access_token: str, **kwargs) -> requests.Response:
        headers = self._headers(access_token)
        headers.update(kwargs.pop('headers', {}))
        try:
            response = requests.request(method, self.table_url, headers=headers,
                                        timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code
            print(f"History {method} failed: {status} {e.response.text[:500]}")
            raise HistoryError(f'History request failed: {status}', status_code=status)
        except requests.exceptions.RequestException as e:
            print(f"History {method} failed: {e}")
            raise HistoryError(f'History request failed: {e}')
        return response

    def save(self, access_token: str, record: dict) -> dict:
        """Insert one record and return the stored row (with id, created_at)."""
        response = self._request(
            'POST', access_token,
            json=record,
            headers={'Prefer': 'return=representation'},
        )
        rows = response.json()
        return rows[0] if isinstance(rows, list) and rows else record

    def list_recent(self, access_token: str, limit: int = DEFAULT_HISTORY_LIMIT) -> List[dict]:
        """Most recent records first."""
        response = self._request(
            'GET', access_token,
            params={'select': '*', 'order': 'created_at.desc', 'limit': str(limit)},
        )
        return response.json()

    def delete(self, access_token: str, record_id: str) -> None:
        self._request('DELETE', access_token, params={'id': f'eq.{record_id}'})
