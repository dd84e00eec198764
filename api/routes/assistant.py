"""Transcript assistant page and generation API endpoints."""

from pathlib import Path

import logfire
from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.dependencies import get_generation_client
from generation.client import GenerationClient, generate_from_transcript
from generation.models import GeneratedContent, GenerationSucceeded, InputRejected
from schemas.generation import ErrorResponse, GenerateRequest
from ui.view_model import COPIED_RESET_SECONDS, AssistantViewModel

# Page template lives with the presentation package
TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "ui" / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["Assistant"])


def _render(request: Request, view: AssistantViewModel) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "view": view,
            "copied_reset_ms": int(COPIED_RESET_SECONDS * 1000),
        },
    )


@router.get("/", response_class=HTMLResponse)
async def assistant_page(
    request: Request,
    client: GenerationClient = Depends(get_generation_client),
):
    """Render the empty assistant page."""
    return _render(request, AssistantViewModel(client))


@router.post("/", response_class=HTMLResponse)
async def assistant_generate(
    request: Request,
    transcript: str = Form(default=""),
    client: GenerationClient = Depends(get_generation_client),
):
    """
    Generate from the submitted form and render the result.

    Errors are shown on the page; the status code stays 200 so the browser
    renders the form with the user's transcript intact.
    """
    view = AssistantViewModel(client)

    with logfire.span("api.assistant_generate", transcript_length=len(transcript)):
        await view.generate(transcript)

        logfire.info(
            "Assistant page generation finished",
            status=view.status.value,
            error=view.error
        )

    return _render(request, view)


@router.post(
    "/api/generate",
    response_model=GeneratedContent,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    },
)
async def generate_content(
    request: GenerateRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    """
    Generate a client email and CRM notes from a transcript.

    Args:
        request: Transcript payload
        client: Generation client (injected by dependency)

    Returns:
        GeneratedContent: email body, mailto link and CRM notes

    Raises:
        HTTPException 400: If the transcript is blank
        HTTPException 502: If the provider call or its response failed
    """
    with logfire.span("api.generate_content", transcript_length=len(request.transcript)):
        outcome = await generate_from_transcript(client, request.transcript)

        if isinstance(outcome, GenerationSucceeded):
            logfire.info("Content generated via API")
            return outcome.content

        if isinstance(outcome, InputRejected):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=outcome.message
            )

        logfire.error("Content generation failed via API", error=outcome.message)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=outcome.message
        )
