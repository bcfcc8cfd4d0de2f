"""``mergeguard-server`` console script."""

import uvicorn

from mergeguard.server.config import get_settings


def run():
    """Serve the webhook app with uvicorn using the configured bind address."""
    settings = get_settings()

    uvicorn.run(
        "mergeguard.server.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
