"""Merge Guard - GitHub App that enforces ticket references in PR titles."""

__version__ = "0.1.0"
