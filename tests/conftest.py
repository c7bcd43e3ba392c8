"""Pytest configuration and fixtures shared across all test modules.

Environment variables are set before any ``screener`` import so the global
settings object is built with test values.
"""

import os

# CRITICAL: must run before importing anything that builds settings
os.environ["APP_ENV"] = "testing"
os.environ.setdefault("LLM_PROVIDER", "openai")
os.environ.setdefault("LLM_MODEL", "gpt-4o-mini")
os.environ.setdefault("LLM_API_KEY", "test-key-123")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from helpers import FakeLLMClient
from screener.schemas.analysis import JobDescription


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def backend_job() -> JobDescription:
    return JobDescription(
        title="Backend Engineer",
        description="Build and operate our order processing services.",
        required_skills="Go,SQL",
        desirable_skills="Docker",
        experience=3,
    )
