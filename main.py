"""Main entrypoint and application factory for the Telegram Payment Tracker.

This module initializes the FastAPI application, configures logging, and owns the bot lifecycle: the lifespan builds the shared clients (LLM, HTTP, database), starts Telegram long polling, and shuts everything down on exit. It also exposes the Scalar API reference endpoint and the main entrypoint for running the app with Uvicorn.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from scalar_fastapi import get_scalar_api_reference

from payment_tracker.api.bot import (
    TelegramTransport,
    build_application,
    register_handlers,
    start_polling,
    stop_polling,
)
from payment_tracker.api.dependencies import get_http_client, get_processor
from payment_tracker.api.routes import router
from payment_tracker.core.settings import get_settings
from payment_tracker.core.utils import add_file_handler, get_logger

LOGGER_NAMES = (
    "payment-tracker",
    "payment-tracker.agent",
    "payment-tracker.parser",
    "payment-tracker.normalizer",
    "payment-tracker.repository",
    "payment-tracker.worker",
    "payment-tracker.bot",
)

logger = get_logger("payment-tracker")


# --- Logging Setup ---
def setup_logging(log_dir: str) -> None:
    """Configure console and file logging for every project logger."""
    for name in LOGGER_NAMES:
        project_logger = get_logger(name)
        project_logger.setLevel(logging.INFO)
        add_file_handler(project_logger, log_dir)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the pipeline, start Telegram polling, and tear both down on shutdown."""
    settings = get_settings()
    setup_logging(settings.log_dir)
    application = build_application(settings)
    transport = TelegramTransport(application.bot, settings)
    async with get_http_client(settings) as http_client:
        processor = get_processor(settings, transport, http_client)
        register_handlers(application, processor)
        await start_polling(application)
        logger.info(f"Bot is running ({settings.extraction_variant} extraction, model {settings.groq_model})")
        try:
            yield
        finally:
            await stop_polling(application)


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="Telegram Payment Tracker",
    description="""
    The Telegram Payment Tracker reads chat messages (text or receipt photos) sent to a Telegram bot,
    extracts payment details with an LLM, and stores them in the payments table.

    **Endpoints:**
    - `GET /health`: Health check endpoint.
    - `GET /scalar`: Interactive Scalar OpenAPI documentation.
    """,
    version="1.0.0",
)
app.include_router(router)


@app.get("/scalar", include_in_schema=False)
async def scalar_docs() -> HTMLResponse:
    """Return Scalar API reference."""
    return get_scalar_api_reference(openapi_url=app.openapi_url, title=app.title)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.server_host, port=settings.server_port)
