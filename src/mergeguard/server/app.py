"""FastAPI application for GitHub App webhook handling."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, HTTPException, BackgroundTasks

from mergeguard import __version__
from mergeguard.server.config import get_settings
from mergeguard.server.webhooks import (
    WebhookEvent,
    handle_webhook,
    verify_webhook_signature,
)


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info(f"Starting Merge Guard webhook server on {settings.host}:{settings.port}")
    logger.info(f"GitHub App ID: {settings.github_app_id}")
    yield
    logger.info("Shutting down Merge Guard webhook server")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI app
    """
    settings = get_settings()

    app = FastAPI(
        title="Merge Guard",
        description="GitHub App that requires a ticket reference in PR titles",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    @app.get("/")
    async def root():
        """Root endpoint with app info."""
        return {
            "name": "Merge Guard",
            "version": __version__,
            "description": "PR title ticket reference check",
            "status": "running",
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.post("/webhook")
    async def webhook(request: Request, background_tasks: BackgroundTasks):
        """GitHub webhook endpoint.

        Receives webhook events from GitHub and processes them.
        """
        body = await request.body()

        await verify_webhook_signature(request, body)

        try:
            payload = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid JSON payload")
        if not isinstance(payload, dict):
            raise HTTPException(status_code=400, detail="Invalid JSON payload")

        event_type = request.headers.get("X-GitHub-Event", "")
        if not event_type:
            raise HTTPException(status_code=400, detail="Missing X-GitHub-Event header")

        if event_type == WebhookEvent.PING:
            return {"status": "pong", "zen": payload.get("zen", "")}

        # Respond right away; GitHub times out slow deliveries
        background_tasks.add_task(process_webhook_async, event_type, payload)

        return {
            "status": "accepted",
            "event": event_type,
            "action": payload.get("action", ""),
        }

    return app


async def process_webhook_async(event_type: str, payload: dict):
    """Process webhook asynchronously.

    Args:
        event_type: GitHub event type
        payload: Webhook payload
    """
    try:
        result = await handle_webhook(event_type, payload)
        logger.info(f"Webhook processed: {result}")
    except Exception as e:
        logger.exception(f"Error processing webhook: {e}")


# Create default app instance
app = create_app()
