"""Pytest configuration and fixtures for integration tests.

Ensures environment variables are loaded and skips the live Gemini tests
when no API key is configured.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Load .env from the project root before test collection."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(env_path)


@pytest.fixture(scope="session", autouse=True)
def check_api_key():
    """Skip every integration test if GEMINI_API_KEY is not configured."""
    if not (os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")):
        pytest.skip(
            "Integration tests skipped. Missing GEMINI_API_KEY. Please set it in your .env file.",
            allow_module_level=True,
        )
