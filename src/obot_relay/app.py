"""FastAPI application with lifespan, health endpoint, and server entry point."""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from obot_relay.config import get_settings
from obot_relay.logging_config import configure_logging
from obot_relay.slack.router import router as slack_router
from obot_relay.task.client import TaskForwarder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and open the task API client on startup."""
    settings = get_settings()
    app.state.settings = settings
    app.state.forwarder = TaskForwarder.from_settings(settings)
    if not settings.task_api_url:
        logger.warning("TASK_API_URL is not set; forwarded events will fail with 500")
    try:
        yield
    finally:
        await app.state.forwarder.aclose()


app = FastAPI(
    title="Obot Relay",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for container probes and local development."""
    return {
        "status": "ok",
        "service": "obot-relay",
        "version": "0.1.0",
    }


def main() -> None:
    """Run the relay under uvicorn. Exits with status 1 if required config is missing."""
    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]).upper() for err in exc.errors() if err["loc"])
        logger.critical("Invalid or missing configuration: %s", fields)
        sys.exit(1)

    configure_logging(settings.log_level)
    logger.info("Server starting on port %s...", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
