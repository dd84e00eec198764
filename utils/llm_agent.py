"""Utilities for creating instrumented pydantic-ai agents."""

import logging
from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic_ai import Agent, NativeOutput
from pydantic_ai.models import Model
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Union[BaseModel, str])

OutputSpec = Union[Type[Union[BaseModel, str]], NativeOutput]


def _resolve_output_type(output_type: Optional[Union[Type[T], NativeOutput]]) -> OutputSpec:
    if output_type is None or output_type is str:
        return str
    if isinstance(output_type, NativeOutput):
        # JSON-mode response constrained by the model's schema (no output tool)
        return output_type
    if issubclass(output_type, BaseModel):
        return output_type
    raise ValueError(
        f"output_type must be str, a Pydantic BaseModel subclass or NativeOutput, got {output_type}"
    )


def _output_name(output_type: OutputSpec) -> str:
    if isinstance(output_type, NativeOutput):
        return getattr(output_type.outputs, "__name__", str(output_type.outputs))
    return getattr(output_type, "__name__", str(output_type))


def _default_system_prompt(output_type: OutputSpec) -> str:
    if output_type is str:
        return "You are a helpful AI assistant."
    return (
        "You are a helpful AI assistant that extracts and structures data into "
        f"{_output_name(output_type)} format."
    )


def _model_label(model: Union[Model, str]) -> str:
    if isinstance(model, str):
        return model
    return f"{model.system}:{model.model_name}"


def create_gemini_model(model_name: str, api_key: str) -> GoogleModel:
    """Build a Gemini model bound to an explicit API key (no env lookup)."""
    return GoogleModel(model_name, provider=GoogleProvider(api_key=api_key))


def create_agent(
    model: Union[Model, str],
    output_type: Optional[Union[Type[T], NativeOutput]] = None,
    system_prompt: Optional[str] = None,
    temperature: float = 0.7,
    max_tokens: Optional[int] = None,
    retries: int = 2,
    timeout: Optional[float] = None,
) -> Agent[None, T]:
    """
    Create a pydantic-ai Agent with optional output validation.

    max_tokens=None leaves the output limit to the provider.
    """
    resolved_output_type = _resolve_output_type(output_type)
    prompt = system_prompt or _default_system_prompt(resolved_output_type)

    model_settings = {"temperature": temperature}
    if max_tokens is not None:
        model_settings["max_tokens"] = max_tokens
    if timeout is not None:
        model_settings["timeout"] = timeout

    agent = Agent(
        model=model,
        output_type=resolved_output_type,
        system_prompt=prompt,
        retries=retries,
        model_settings=model_settings,
    )

    logger.debug(
        "Created agent: model=%s, output_type=%s, temperature=%s, max_tokens=%s, retries=%s, timeout=%s",
        _model_label(model),
        _output_name(resolved_output_type),
        temperature,
        max_tokens,
        retries,
        timeout,
    )

    return agent
