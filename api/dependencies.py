"""Request dependencies shared by the API routes."""

from fastapi import HTTPException, Request, status

from generation.client import GenerationClient


def get_generation_client(request: Request) -> GenerationClient:
    """
    Return the generation client built at startup.

    Raises:
        HTTPException: 503 if the application started without a client
    """
    client = getattr(request.app.state, "generation_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Generation client not initialized",
        )
    return client
