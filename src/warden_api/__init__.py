"""Warden API - HTTP transport for the authentication service.

Usage:
    uvicorn warden_api.app:create_app --factory
"""

from warden_api.app import create_app

__all__ = ["create_app"]
