"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the value types of the provider registry and the
storage interface (port) the domain requires from infrastructure.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol


class VerificationStatus(IntEnum):
    """
    Verification status of a registered provider.

    Integer values are the wire values (PENDING=1, VERIFIED=2, REJECTED=3).

    Transitions (unconstrained):
    - Initial state is PENDING (set by registration)
    - Any status -> any status, only via verify_provider from a verifier

    There is no terminal state; every status is re-enterable, including
    regressions such as VERIFIED -> PENDING.
    """

    PENDING = 1
    VERIFIED = 2
    REJECTED = 3


class ErrorCode(IntEnum):
    """
    Closed set of registry error codes.

    Returned inside Err results, never raised by the domain service.
    """

    UNAUTHORIZED = 100
    ALREADY_REGISTERED = 101
    NOT_FOUND = 102


@dataclass(frozen=True)
class Provider:
    """
    Registered provider record.

    Immutable: verification updates replace the stored record, so a reader
    always holds a consistent snapshot.
    """

    id: int
    name: str
    credentials: str
    background_check_passed: bool = False
    verification_status: VerificationStatus = VerificationStatus.PENDING


class RegistryStore(Protocol):
    """Port interface for registry persistence (providers, principals, verifiers)."""

    def claim_principal(self, principal: str, name: str, credentials: str) -> int | None:
        """
        Atomically register a provider for a principal.

        Assigns id = provider_count + 1, stores a PENDING provider with
        background_check_passed=False, maps the principal to the new id and
        advances provider_count.

        Args:
            principal: Opaque caller identity
            name: Provider display name
            credentials: Free-form credentials description

        Returns:
            The new provider id, or None if the principal already owns a
            provider (nothing is mutated in that case)
        """
        ...

    def add_verifier(self, principal: str) -> None:
        """Add principal to the verifier set (idempotent)."""
        ...

    def is_verifier(self, principal: str) -> bool:
        """Return True if principal is in the verifier set."""
        ...

    def list_verifiers(self) -> frozenset[str]:
        """Return a snapshot of the verifier set."""
        ...

    def update_verification(
        self, provider_id: int, background_check_passed: bool, status: VerificationStatus
    ) -> bool:
        """
        Overwrite the verification fields of a provider.

        Both fields are replaced unconditionally; no transition check.

        Returns:
            True if the provider exists and was updated, False otherwise
        """
        ...

    def get_provider(self, provider_id: int) -> Provider | None:
        """Look up a provider by id."""
        ...

    def get_provider_id(self, principal: str) -> int | None:
        """Look up the provider id registered by a principal."""
        ...

    def provider_count(self) -> int:
        """Return the highest assigned provider id (0 when empty)."""
        ...
