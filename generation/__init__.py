"""
Transcript content generation.

Builds the prompt for a meeting transcript, calls Gemini once with a
structured output schema and returns:
- A client email (plain-text body + mailto: link)
- CRM notes (bullet points)
"""

from .client import GenerationClient, generate_from_transcript, init_generation_client
from .exceptions import AssistantError, ConfigurationError, GenerationError
from .models import (
    GeneratedContent,
    GeneratedEmail,
    GenerationFailed,
    GenerationOutcome,
    GenerationSucceeded,
    InputRejected,
)
from .prompts import build_prompt

__all__ = [
    "GenerationClient",
    "generate_from_transcript",
    "init_generation_client",
    "AssistantError",
    "ConfigurationError",
    "GenerationError",
    "GeneratedContent",
    "GeneratedEmail",
    "GenerationFailed",
    "GenerationOutcome",
    "GenerationSucceeded",
    "InputRejected",
    "build_prompt",
]
