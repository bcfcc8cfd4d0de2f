"""Pytest fixtures for mergeguard tests."""

import os

import pytest
from unittest.mock import MagicMock

# The server module builds its app at import time and needs an app id
os.environ.setdefault("GITHUB_APP_ID", "12345")

from mergeguard.github.models import CheckRunRef  # noqa: E402


@pytest.fixture
def mock_github_client():
    """Mock GitHub client for testing."""
    client = MagicMock()
    client.create_check_run.return_value = CheckRunRef(
        id=777, name="[Merge Guard]", head_sha="abc123"
    )
    return client


@pytest.fixture
def sample_pr_payload():
    """Sample pull_request webhook payload."""
    return {
        "action": "opened",
        "installation": {"id": 12345},
        "repository": {
            "name": "repo",
            "full_name": "owner/repo",
            "owner": {"login": "owner"},
        },
        "sender": {"login": "user"},
        "pull_request": {
            "number": 42,
            "title": "Fix bug JIRA-1234 in parser",
            "head": {"sha": "abc123", "ref": "feature/parser"},
        },
    }


@pytest.fixture
def rsa_private_key():
    """PEM-encoded RSA private key for JWT signing."""
    from cryptography.hazmat.primitives import serialization
    from cryptography.hazmat.primitives.asymmetric import rsa

    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
