"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the registry
service and the caller principal into routes.
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader

from provider_registry.domain.registry import ProviderRegistry


def get_registry(request: Request) -> ProviderRegistry:
    """
    Get the registry from app state.

    The registry is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.registry


# Caller identity header security scheme for OpenAPI documentation.
# The upstream authentication layer sets this after verifying the caller.
principal_header = APIKeyHeader(
    name="X-Principal",
    description="Authenticated caller principal",
    auto_error=False,
)


def get_caller(principal: str | None = Depends(principal_header)) -> str:
    """
    Extract the caller principal from the X-Principal header.

    The value is opaque and used verbatim (no normalization).

    Returns:
        Caller principal

    Raises:
        HTTPException: 401 if the header is missing or empty
    """
    if not principal:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing caller principal",
        )
    return principal
