"""HTTP API for scanning, planning and executing moves."""

from .app import create_app

__all__ = ["create_app"]
