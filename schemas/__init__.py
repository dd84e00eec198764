"""
Pydantic schemas for request/response validation.
"""

from schemas.generation import ErrorResponse, GenerateRequest

__all__ = [
    "ErrorResponse",
    "GenerateRequest",
]
