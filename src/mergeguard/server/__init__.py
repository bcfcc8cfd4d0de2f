"""Merge Guard webhook server for GitHub App integration."""

from mergeguard.server.app import create_app
from mergeguard.server.config import Settings

__all__ = ["create_app", "Settings"]
