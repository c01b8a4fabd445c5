"""
API v1 routes.

Defines REST endpoints for the provider registry. Mutating endpoints take
the caller principal from the X-Principal header; reads are unrestricted.
"""

from fastapi import APIRouter, Depends, status

from provider_registry.api.dependencies import get_caller, get_registry
from provider_registry.api.models import (
    AddVerifierRequest,
    AddVerifierResponse,
    ErrorResponse,
    ProviderIdResponse,
    ProviderResponse,
    RegisterProviderRequest,
    RegisterProviderResponse,
    VerifiedResponse,
    VerifyProviderRequest,
)
from provider_registry.domain.exceptions import ProviderNotFound
from provider_registry.domain.registry import ProviderRegistry

router = APIRouter(tags=["v1"])


@router.post(
    "/providers",
    response_model=RegisterProviderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse, "description": "Missing caller principal"},
        409: {"model": ErrorResponse, "description": "Principal already registered"},
        422: {"description": "Validation error"},
    },
    summary="Register a provider",
    description="Register a provider owned by the calling principal. "
    "Each principal may register exactly one provider; it starts PENDING.",
)
async def register_provider(
    request_data: RegisterProviderRequest,
    caller: str = Depends(get_caller),
    registry: ProviderRegistry = Depends(get_registry),
) -> RegisterProviderResponse:
    """
    Register a provider for the caller.

    - **name**: Provider display name
    - **credentials**: Qualifications and certifications
    """
    provider_id = registry.register_provider(
        request_data.name, request_data.credentials, caller
    ).unwrap()
    return RegisterProviderResponse(provider_id=provider_id)


@router.post(
    "/verifiers",
    response_model=AddVerifierResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Missing caller principal"},
        403: {"model": ErrorResponse, "description": "Caller is not the admin"},
        422: {"description": "Validation error"},
    },
    summary="Grant verifier authority",
    description="Admin-only. Adds a principal to the verifier set. "
    "Adding an existing verifier succeeds without change.",
)
async def add_verifier(
    request_data: AddVerifierRequest,
    caller: str = Depends(get_caller),
    registry: ProviderRegistry = Depends(get_registry),
) -> AddVerifierResponse:
    added = registry.add_verifier(request_data.verifier, caller).unwrap()
    return AddVerifierResponse(verifier=request_data.verifier, added=added)


@router.put(
    "/providers/{provider_id}/verification",
    response_model=ProviderResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Missing caller principal"},
        403: {"model": ErrorResponse, "description": "Caller is not a verifier"},
        404: {"model": ErrorResponse, "description": "Provider not found"},
        422: {"description": "Validation error"},
    },
    summary="Record a verification outcome",
    description="Verifier-only. Overwrites the background check flag and "
    "verification status. Authorization is checked before existence.",
)
async def verify_provider(
    provider_id: int,
    request_data: VerifyProviderRequest,
    caller: str = Depends(get_caller),
    registry: ProviderRegistry = Depends(get_registry),
) -> ProviderResponse:
    """
    Set verification fields of a provider.

    - **background_check_passed**: Background check outcome
    - **status**: 1 = PENDING, 2 = VERIFIED, 3 = REJECTED
    """
    registry.verify_provider(
        provider_id, request_data.background_check_passed, request_data.status, caller
    ).unwrap()

    # Report what this request wrote; a later writer may already have replaced it.
    # Providers are never deleted and name/credentials never change.
    provider = registry.get_provider(provider_id)
    return ProviderResponse(
        id=provider.id,
        name=provider.name,
        credentials=provider.credentials,
        background_check_passed=request_data.background_check_passed,
        verification_status=request_data.status,
    )


@router.get(
    "/providers/{provider_id}",
    response_model=ProviderResponse,
    responses={404: {"model": ErrorResponse, "description": "Provider not found"}},
    summary="Get a provider",
)
async def get_provider(
    provider_id: int,
    registry: ProviderRegistry = Depends(get_registry),
) -> ProviderResponse:
    provider = registry.get_provider(provider_id)
    if provider is None:
        raise ProviderNotFound(f"No provider with id {provider_id}")
    return ProviderResponse.from_domain(provider)


@router.get(
    "/providers/{provider_id}/verified",
    response_model=VerifiedResponse,
    summary="Check whether a provider is verified",
    description="True only if the provider exists and its status is VERIFIED. "
    "The background check flag is not considered.",
)
async def is_provider_verified(
    provider_id: int,
    registry: ProviderRegistry = Depends(get_registry),
) -> VerifiedResponse:
    return VerifiedResponse(
        provider_id=provider_id,
        verified=registry.is_provider_verified(provider_id),
    )


@router.get(
    "/principals/{principal:path}/provider",
    response_model=ProviderIdResponse,
    responses={404: {"model": ErrorResponse, "description": "Principal has not registered"}},
    summary="Look up the provider id of a principal",
)
async def get_provider_id(
    principal: str,
    registry: ProviderRegistry = Depends(get_registry),
) -> ProviderIdResponse:
    provider_id = registry.get_provider_id(principal)
    if provider_id is None:
        raise ProviderNotFound(f"No provider registered by {principal}")
    return ProviderIdResponse(principal=principal, provider_id=provider_id)
