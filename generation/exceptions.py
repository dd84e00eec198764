"""
Custom exceptions for transcript content generation.

ConfigurationError stops the application at startup. GenerationError is the
single error type surfaced by the generation client for any failure of a
provider call, so callers only need to handle one type per request.
"""


class AssistantError(Exception):
    """
    Base exception for the transcript assistant.

    All generation-related exceptions inherit from this.
    """
    pass


class ConfigurationError(AssistantError):
    """
    Raised when required configuration is missing at startup.

    Example: GEMINI_API_KEY is not set, so no client can be built.
    """
    pass


class GenerationError(AssistantError):
    """
    Raised when a generation request fails.

    Covers network/provider failures, responses that are not valid JSON and
    responses that do not match the output schema. The message is safe to
    show to the user.

    Attributes:
        original_error: The underlying exception (None if not caused by one)
    """

    def __init__(self, message: str, original_error: Exception | None = None):
        self.original_error = original_error
        super().__init__(message)
