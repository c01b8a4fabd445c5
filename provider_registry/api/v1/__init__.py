"""
API v1 package.

Contains versioned API routes for the provider registry.
"""

from provider_registry.api.v1.routes import router

__all__ = ["router"]
