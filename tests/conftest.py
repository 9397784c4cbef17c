"""Shared fixtures for the revelio test-suite."""

import logging

import pytest

from revelio.core.config import Config
from revelio.core.logger import logger


JS_URL = "https://target.example/static/app.min.js"
OTHER_URL = "https://cdn.example/bundle.js"

# Test strings intentionally contain fake credentials; they are inputs for the
# extractor, not real secrets.
MINIFIED_JS = (
    'var config={apiKey:"AIzaFakeKey123",authDomain:"demo.firebaseapp.com"};'
    'var token=\'tok_abc\';window.settings.secret="nested";'
    'function f(a){if(a=="x"){return a}}'
)


@pytest.fixture(autouse=True)
def reset_logger_level():
    yield
    logger.setLevel(logging.INFO)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("REVELIO_TIMEOUT", "REVELIO_CONCURRENCY", "REVELIO_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    return Config(timeout=5, max_concurrent=2)
