"""
Generation Models

Pydantic models for the structured output requested from Gemini, plus the
tagged outcome returned by the generate action.
"""

from dataclasses import dataclass
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .prompts import BULLET, CRM_NOTES_CHAR_LIMIT

MAILTO_SCHEME = "mailto:"


class GeneratedEmail(BaseModel):
    """Client-facing email draft."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    body: str = Field(
        description=(
            "The full, plain-text body of the email. Preserve line breaks with \\n. "
            "Do not include a sign-off or contact details."
        )
    )

    mailto_link: str = Field(
        alias="mailtoLink",
        description=(
            "The fully URL-encoded mailto: link, including recipient (if known), subject, "
            "and the generated body. It should be just the URL, not in Markdown format."
        )
    )


class GeneratedContent(BaseModel):
    """
    Everything generated from one transcript.

    This is the response format we expect from Gemini. Wire names are
    camelCase (clientEmail, mailtoLink, crmNotes).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "clientEmail": {
                    "body": "Hi John,\n\nThanks for your time today...",
                    "mailtoLink": "mailto:?subject=Your%20mortgage&body=Hi%20John%2C..."
                },
                "crmNotes": "• DIP requested\n• LTV 80%"
            }
        }
    )

    client_email: GeneratedEmail = Field(alias="clientEmail")

    crm_notes: str = Field(
        alias="crmNotes",
        description=(
            "A single block of text containing concise bullet points for CRM notes. "
            f"Each bullet point must start with '{BULLET}'. "
            f"Keep the total under {CRM_NOTES_CHAR_LIMIT} characters."
        )
    )


# ===================================================================
# GENERATION OUTCOME
# ===================================================================

@dataclass(frozen=True)
class GenerationSucceeded:
    """Generation finished and produced validated content."""

    content: GeneratedContent
    status: Literal["success"] = "success"


@dataclass(frozen=True)
class InputRejected:
    """The transcript was rejected before any provider call."""

    message: str
    status: Literal["input_error"] = "input_error"


@dataclass(frozen=True)
class GenerationFailed:
    """The provider call or its response handling failed."""

    message: str
    status: Literal["generation_error"] = "generation_error"


GenerationOutcome = Union[GenerationSucceeded, InputRejected, GenerationFailed]
