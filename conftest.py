"""Root conftest.py for pytest configuration.

This file configures pytest for the entire project, ensuring:
- Proper Python path setup for imports
- Logfire observability configuration (local only)
- No real model requests from pydantic-ai during tests
- Shared fixtures across all tests
"""

import json
import sys
from pathlib import Path

import logfire
import pytest
from pydantic_ai import models
from pydantic_ai.messages import ModelResponse, TextPart
from pydantic_ai.models.function import FunctionModel
from pydantic_ai.profiles import ModelProfile

from generation.client import GenerationClient


# ============================================================================
# Python Path Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings and ensure project root is in sys.path."""

    project_root = Path(__file__).parent.resolve()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    # Register custom markers
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests requiring external services"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests (fast, no external dependencies)"
    )

    # Configure logfire for all tests (nothing leaves the machine)
    logfire.configure(
        service_name="transcript_assistant_tests",
        environment="test",
        send_to_logfire=False,
        console=False,
    )

    # Only FunctionModel may answer prompts in tests
    models.ALLOW_MODEL_REQUESTS = False


# ============================================================================
# Shared Fixtures
# ============================================================================

JOHN_RESPONSE = {
    "clientEmail": {
        "body": "Hi John,\n\nThanks for your time today. Here is a summary of our call...",
        "mailtoLink": "mailto:?subject=Update&body=Hi%20John%2C",
    },
    "crmNotes": "• DIP requested\n• LTV 80%",
}


@pytest.fixture(scope="session")
def project_root():
    """Return the absolute path to the project root directory."""
    return Path(__file__).parent.resolve()


@pytest.fixture
def john_response():
    """Provider output for the £200,000 mortgage scenario."""
    return {
        "clientEmail": dict(JOHN_RESPONSE["clientEmail"]),
        "crmNotes": JOHN_RESPONSE["crmNotes"],
    }


# Gemini-like profile: JSON-schema responses without an output tool
JSON_SCHEMA_PROFILE = ModelProfile(supports_json_schema_output=True)


def json_text_response(output) -> ModelResponse:
    """Provider reply carrying output as response text (dicts are JSON-encoded)."""
    text = output if isinstance(output, str) else json.dumps(output)
    return ModelResponse(parts=[TextPart(content=text)])


def function_model(respond) -> FunctionModel:
    return FunctionModel(respond, profile=JSON_SCHEMA_PROFILE)


@pytest.fixture
def client_returning():
    """Build a GenerationClient whose model returns the given output as JSON text.

    Usage:
        def test_something(client_returning):
            client = client_returning({"clientEmail": {...}, "crmNotes": "..."})
    """
    def _make(output: dict) -> GenerationClient:
        return GenerationClient(model=function_model(lambda messages, info: json_text_response(output)))

    return _make


@pytest.fixture
def recording_client():
    """Build a GenerationClient backed by a FunctionModel that records calls.

    Returns (client, calls). Each call appends (messages, info). The
    model answers with the given output (a dict, or raw response text), or
    raises the given exception.
    """
    def _make(output=None, raise_error: Exception | None = None):
        calls = []

        def respond(messages, info):
            calls.append((messages, info))
            if raise_error is not None:
                raise raise_error
            return json_text_response(output)

        return GenerationClient(model=function_model(respond)), calls

    return _make


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Fixture to mock environment variables for testing.

    Usage:
        def test_something(mock_env_vars):
            mock_env_vars({"GEMINI_API_KEY": "test-key", "DEBUG": "true"})
    """
    def _set_env_vars(env_dict: dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)

    return _set_env_vars

