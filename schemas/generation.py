"""
Pydantic schemas for the generation API endpoint.

The response body is GeneratedContent itself (camelCase wire names).
"""

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================
# REQUEST SCHEMAS
# ===================================================================

class GenerateRequest(BaseModel):
    """
    Request body for POST /api/generate

    Blank transcripts are accepted here and rejected by the generate action,
    so the API and the page return the same message.
    """

    transcript: str = Field(
        ...,
        description="Raw meeting transcript (any length)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "transcript": "Client John wants a £200,000 mortgage on a £250,000 purchase..."
            }
        }
    )


# ===================================================================
# RESPONSE SCHEMAS
# ===================================================================

class ErrorResponse(BaseModel):
    """Error body returned by HTTPException handlers."""

    detail: str = Field(..., description="Human-readable error message")
