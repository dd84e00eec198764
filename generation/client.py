"""
Generation Client

Turns a meeting transcript into a client email and CRM notes with one
Gemini call.

Responsibilities:
- Build the Gemini-backed client once at startup (fails fast without a key)
- Request a JSON response constrained by the GeneratedContent schema at low temperature
- Sanitize the mailto link in the parsed result
- Surface every failure as GenerationError (exactly one attempt, no retries)
- Expose the generate action as a tagged GenerationOutcome
"""

import logfire
from typing import Optional, Union

from pydantic_ai import NativeOutput
from pydantic_ai.models import Model

from config.settings import Settings
from utils.llm_agent import create_agent, create_gemini_model

from .exceptions import ConfigurationError, GenerationError
from .models import (
    GeneratedContent,
    GenerationFailed,
    GenerationOutcome,
    GenerationSucceeded,
    InputRejected,
)
from .prompts import SYSTEM_PROMPT, build_prompt
from .utils import sanitize_content

EMPTY_TRANSCRIPT_MESSAGE = "Please enter a transcript."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while generating content."


class GenerationClient:
    """
    Authenticated handle for the generative provider.

    Built once (see init_generation_client) and passed explicitly to
    whatever needs to generate content.
    """

    def __init__(
        self,
        model: Union[Model, str],
        temperature: float = 0.2,
        max_tokens: Optional[int] = None,
    ):
        """
        Initialize the client.

        Args:
            model: pydantic-ai model instance or model identifier
            temperature: Sampling temperature (low for consistent output)
            max_tokens: Output token limit, None to leave it to the provider
        """
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

        # JSON-mode response with the schema attached; retries=0 fails a bad response instead of re-asking
        self.agent = create_agent(
            model=model,
            output_type=NativeOutput(GeneratedContent),
            system_prompt=SYSTEM_PROMPT,
            temperature=temperature,
            max_tokens=max_tokens,
            retries=0,
        )

    @property
    def model_name(self) -> str:
        if isinstance(self.model, str):
            return self.model
        return self.model.model_name

    async def generate(self, prompt: str) -> GeneratedContent:
        """
        Run one generation request.

        Args:
            prompt: Fully built prompt (see build_prompt)

        Returns:
            Parsed and sanitized GeneratedContent

        Raises:
            GenerationError: If the call fails or the response cannot be parsed
        """
        with logfire.span("generation.generate", model=self.model_name):
            try:
                logfire.info(
                    "Requesting content from provider",
                    model=self.model_name,
                    temperature=self.temperature,
                    prompt_length=len(prompt)
                )

                result = await self.agent.run(prompt)
                content = sanitize_content(result.output)

                logfire.info(
                    "Content generated",
                    email_length=len(content.client_email.body),
                    crm_notes_length=len(content.crm_notes)
                )

                return content

            except Exception as e:
                logfire.error(
                    "Error calling Gemini API",
                    error=str(e),
                    error_type=type(e).__name__
                )

                if str(e):
                    raise GenerationError(f"Failed to generate content: {e}", original_error=e) from e
                raise GenerationError(UNKNOWN_ERROR_MESSAGE, original_error=e) from e


def init_generation_client(settings: Settings) -> GenerationClient:
    """
    Build the Gemini generation client from process configuration.

    Call once at startup.

    Raises:
        ConfigurationError: If the Gemini API key is not configured
    """
    api_key = (settings.gemini_api_key or "").strip()
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY environment variable not set")

    client = GenerationClient(
        model=create_gemini_model(settings.gemini_model, api_key),
        temperature=settings.generation_temperature,
    )

    logfire.info(
        "Generation client initialized",
        model=settings.gemini_model,
        temperature=settings.generation_temperature
    )

    return client


async def generate_from_transcript(client: GenerationClient, transcript: str) -> GenerationOutcome:
    """
    The generate action: validate the transcript, then generate once.

    Blank input never reaches the provider. Generation failures come back as
    GenerationFailed rather than as exceptions.

    Args:
        client: Client from init_generation_client
        transcript: Raw transcript text

    Returns:
        GenerationSucceeded, InputRejected or GenerationFailed
    """
    if not (transcript or "").strip():
        logfire.info("Rejected blank transcript")
        return InputRejected(message=EMPTY_TRANSCRIPT_MESSAGE)

    prompt = build_prompt(transcript)

    try:
        content = await client.generate(prompt)
    except GenerationError as e:
        return GenerationFailed(message=str(e))

    return GenerationSucceeded(content=content)
