"""
Shared pytest fixtures for Viral Studio tests.
"""

import pytest
import sys
import importlib.util
from pathlib import Path

# Project root for finding Cloud Function modules
PROJECT_ROOT = Path(__file__).parent.parent


def _load_module_from_path(module_name: str, file_path: Path):
    """Load a module from a specific file path."""
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


# Load Cloud Function modules with unique names at module load time
_generate_title_module = _load_module_from_path(
    'generate_title_main',
    PROJECT_ROOT / 'generate-title' / 'main.py'
)

_generate_thumbnail_module = _load_module_from_path(
    'generate_thumbnail_main',
    PROJECT_ROOT / 'generate-thumbnail' / 'main.py'
)

TEST_API_KEY = 'test-gateway-key'


# ============================================================================
# Environment
# ============================================================================

@pytest.fixture(autouse=True)
def gateway_env(monkeypatch):
    """Every test starts with an API key and no timeout override."""
    monkeypatch.setenv('LOVABLE_API_KEY', TEST_API_KEY)
    monkeypatch.delenv('AI_GATEWAY_TIMEOUT', raising=False)
    return TEST_API_KEY


@pytest.fixture
def gateway_url():
    """URL the gateway client posts to."""
    from viral_studio import gateway
    return gateway.AI_GATEWAY_URL


# ============================================================================
# Entry Point Fixtures
# ============================================================================

@pytest.fixture
def generate_title():
    """Returns main entry point from generate-title."""
    return _generate_title_module.generate_title


@pytest.fixture
def generate_thumbnail():
    """Returns main entry point from generate-thumbnail."""
    return _generate_thumbnail_module.generate_thumbnail


@pytest.fixture
def mock_flask_request():
    """Factory for creating mock Flask request objects."""
    class MockRequest:
        def __init__(self, json_data=None, method='POST'):
            self._json = json_data
            self.method = method
            self.data = b''

        def get_json(self, force=False, silent=False):
            return self._json

    return MockRequest


# ============================================================================
# Gateway Response Builders
# ============================================================================

@pytest.fixture
def completion_response():
    """Factory for a text chat-completion response body."""
    def _build(content):
        return {
            'id': 'chatcmpl-test',
            'object': 'chat.completion',
            'model': 'google/gemini-2.5-flash',
            'choices': [{
                'index': 0,
                'finish_reason': 'stop',
                'message': {'role': 'assistant', 'content': content},
            }],
        }
    return _build


@pytest.fixture
def image_response():
    """Factory for an image chat-completion response body."""
    def _build(url='https://cdn.example.com/thumb.png'):
        return {
            'id': 'chatcmpl-image',
            'object': 'chat.completion',
            'model': 'google/gemini-2.5-flash-image-preview',
            'choices': [{
                'index': 0,
                'finish_reason': 'stop',
                'message': {
                    'role': 'assistant',
                    'content': 'Here is your thumbnail.',
                    'images': [{'type': 'image_url', 'image_url': {'url': url}}],
                },
            }],
        }
    return _build
