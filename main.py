"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logfire

from config import settings
from generation.client import init_generation_client
from observability.logfire_config import LogfireConfig
from api.routes import assistant_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment)

    logfire.info(
        "Starting Transcript Assistant",
        environment=settings.environment,
        debug=settings.debug,
    )

    # Fails fast (ConfigurationError) when GEMINI_API_KEY is missing
    try:
        app.state.generation_client = init_generation_client(settings)
    except Exception as e:
        logfire.error(
            "Generation client initialization failed",
            error=str(e),
            hint="Set GEMINI_API_KEY (or API_KEY) in the environment or .env file",
        )
        raise

    logfire.info("Transcript Assistant startup complete", model=settings.gemini_model)

    yield

    # Shutdown
    logfire.info("Shutting down Transcript Assistant")


# Initialize FastAPI app
app = FastAPI(
    title="Transcript Assistant",
    description="Client emails and CRM notes from meeting transcripts",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status and the configured Gemini model
    """
    client = getattr(app.state, "generation_client", None)

    return {
        "status": "healthy" if client is not None else "degraded",
        "service": "transcript-assistant",
        "version": "1.0.0",
        "model": settings.gemini_model,
        "environment": settings.environment,
    }


# ============================================================================
# API Routers
# ============================================================================

# Assistant page (GET/POST /) and JSON generation endpoint (POST /api/generate)
app.include_router(assistant_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
