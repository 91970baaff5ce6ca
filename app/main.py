"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from openai import AsyncOpenAI

from app.core.config import settings
from app.core.logging import setup_logging
from app.routes import docs_router, health_router, secop_router
from app.services.relevance import RelevanceAnalyzer
from app.services.secop_client import SecopClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize outbound clients on startup, close them on shutdown."""
    setup_logging()

    secop = SecopClient(
        settings.SECOP_BASE_URL,
        app_token=settings.SECOP_APP_TOKEN,
        timeout=settings.SECOP_TIMEOUT_S,
    )
    app.state.secop = secop

    openai_client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY, timeout=settings.LLM_TIMEOUT_S)
    app.state.analyzer = RelevanceAnalyzer(
        openai_client,
        model=settings.MODEL_NAME,
        temperature=settings.LLM_TEMPERATURE,
    )
    logger.info("SECOP source: %s, model: %s", settings.SECOP_BASE_URL, settings.MODEL_NAME)

    try:
        yield
    finally:
        try:
            await secop.aclose()
        finally:
            await openai_client.close()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# Register routers
app.include_router(docs_router)
app.include_router(health_router)
app.include_router(secop_router)
