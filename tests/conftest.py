import pytest
from uploadcare_loader.config import LoaderConfig

LOADER_ENV_VARS = [
    'UPLOADCARE_PUBLIC_KEY',
    'UPLOADCARE_CUSTOM_PROXY_DOMAIN',
    'UPLOADCARE_CUSTOM_CDN_DOMAIN',
    'UPLOADCARE_APP_BASE_URL',
    'UPLOADCARE_TRANSFORMATION_PARAMETERS',
    'APP_ENV',
]

DEFAULT_SEGMENT = "/-/format/auto/-/stretch/off/-/progressive/yes/-/resize/{width}x/-/quality/normal/"

@pytest.fixture
def clean_env(monkeypatch):
    """Remove loader variables; anything set during the test is undone afterwards."""
    for name in LOADER_ENV_VARS:
        monkeypatch.setenv(name, 'placeholder')
        monkeypatch.delenv(name)
    return monkeypatch

@pytest.fixture
def no_dotenv(monkeypatch):
    """Keep a stray .env file from leaking into environment based tests."""
    monkeypatch.setattr('uploadcare_loader.config.load_dotenv', lambda *args, **kwargs: False)

@pytest.fixture
def config():
    """Production configuration with only a public key."""
    return LoaderConfig(public_key='test-public-key')

@pytest.fixture
def default_segment():
    def _segment(width):
        return DEFAULT_SEGMENT.format(width=width)
    return _segment
