"""HTTP API."""

from buddy.api.app import create_app

__all__ = ["create_app"]
