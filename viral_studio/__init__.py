"""Shared utilities for the Viral Studio Cloud Functions."""

from .errors import (
    ViralStudioError,
    InvalidRequestError,
    ConfigurationError,
    UpstreamError,
    UpstreamRateLimited,
    UpstreamQuotaExhausted,
    NoImageError,
    HistoryError,
)

from .title_utils import (
    MAX_TITLES,
    strip_code_fence,
    parse_json_titles,
    split_title_lines,
    parse_titles,
)

from .thumbnail_utils import extract_image_url

from .history import (
    HISTORY_TABLE,
    HistoryClient,
    build_history_record,
)

__all__ = [
    # Errors
    'ViralStudioError',
    'InvalidRequestError',
    'ConfigurationError',
    'UpstreamError',
    'UpstreamRateLimited',
    'UpstreamQuotaExhausted',
    'NoImageError',
    'HistoryError',
    # Title utilities
    'MAX_TITLES',
    'strip_code_fence',
    'parse_json_titles',
    'split_title_lines',
    'parse_titles',
    # Thumbnail utilities
    'extract_image_url',
    # History
    'HISTORY_TABLE',
    'HistoryClient',
    'build_history_record',
]
