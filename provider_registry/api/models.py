"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field

from provider_registry.domain.ports import Provider, VerificationStatus


class RegisterProviderRequest(BaseModel):
    """Request model for provider registration."""

    name: str = Field(..., description="Provider display name")
    credentials: str = Field(..., description="Qualifications and certifications")


class RegisterProviderResponse(BaseModel):
    """Response model for successful registration."""

    provider_id: int


class AddVerifierRequest(BaseModel):
    """Request model for granting verifier authority."""

    verifier: str = Field(..., min_length=1, description="Principal to grant verifier role")


class AddVerifierResponse(BaseModel):
    """Response model for a verifier grant."""

    verifier: str
    added: bool


class VerifyProviderRequest(BaseModel):
    """Request model for recording a verification outcome."""

    background_check_passed: bool
    status: VerificationStatus = Field(
        ..., description="1 = PENDING, 2 = VERIFIED, 3 = REJECTED"
    )


class ProviderResponse(BaseModel):
    """Provider record as exposed over HTTP."""

    id: int
    name: str
    credentials: str
    background_check_passed: bool
    verification_status: VerificationStatus

    @classmethod
    def from_domain(cls, provider: Provider) -> "ProviderResponse":
        return cls(
            id=provider.id,
            name=provider.name,
            credentials=provider.credentials,
            background_check_passed=provider.background_check_passed,
            verification_status=provider.verification_status,
        )


class ProviderIdResponse(BaseModel):
    """Response model for principal -> provider id lookup."""

    principal: str
    provider_id: int


class VerifiedResponse(BaseModel):
    """Response model for the verified predicate."""

    provider_id: int
    verified: bool


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
    code: int | None = None
