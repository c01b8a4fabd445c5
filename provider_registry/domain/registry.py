"""
Provider registry domain service - Registration and verification workflow.

This module contains the core business logic of the registry: providers
self-register, a single fixed admin grants verifier authority, and
verifiers attest to background checks and verification status.

Roles (capability checks, not types)
====================================

- admin:     caller == registry.admin (fixed at construction)
- verifier:  caller in the verifier set (append-only, no revocation)
- anyone:    may register once, and may read

Verification Status (unconstrained)
===================================

    PENDING | VERIFIED | REJECTED  ->  PENDING | VERIFIED | REJECTED

All transitions are allowed, only through verify_provider. The
background_check_passed flag is independent of the status.

Check Ordering
==============

verify_provider checks authorization strictly before existence, so an
unauthorized caller gets UNAUTHORIZED whether or not the provider exists.

Mutating operations are serialized by a writer lock so that each
precondition check and its effect apply atomically.
"""

import logging
import threading

from .ports import ErrorCode, Provider, RegistryStore, VerificationStatus
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Domain service for provider registration and verification.

    Holds an explicit handle on its store; there is no ambient singleton.
    The admin principal is set at construction and cannot be changed.
    """

    def __init__(self, admin: str, store: RegistryStore) -> None:
        self._admin = admin
        self.store = store
        self._write_lock = threading.Lock()

    @property
    def admin(self) -> str:
        return self._admin

    def register_provider(self, name: str, credentials: str, caller: str) -> Result[int]:
        """
        Register a new provider owned by the caller.

        Args:
            name: Provider display name
            credentials: Free-form credentials description
            caller: Authenticated caller principal

        Returns:
            Ok(provider_id) with id = provider_count + 1, or
            Err(ALREADY_REGISTERED) if the caller already owns a provider
        """
        with self._write_lock:
            provider_id = self.store.claim_principal(caller, name, credentials)

        if provider_id is None:
            logger.warning(
                "Registration rejected: principal=%s code=%s",
                caller,
                ErrorCode.ALREADY_REGISTERED.value,
            )
            return Err(ErrorCode.ALREADY_REGISTERED)

        logger.info("Provider registered: id=%s principal=%s", provider_id, caller)
        return Ok(provider_id)

    def add_verifier(self, verifier: str, caller: str) -> Result[bool]:
        """
        Grant verifier authority to a principal.

        Only the admin may call this. Re-adding an existing verifier is a
        successful no-op.

        Returns:
            Ok(True), or Err(UNAUTHORIZED) if caller is not the admin
        """
        if caller != self._admin:
            logger.warning(
                "Verifier grant rejected: caller=%s code=%s",
                caller,
                ErrorCode.UNAUTHORIZED.value,
            )
            return Err(ErrorCode.UNAUTHORIZED)

        with self._write_lock:
            self.store.add_verifier(verifier)

        logger.info("Verifier added: %s", verifier)
        return Ok(True)

    def verify_provider(
        self,
        provider_id: int,
        background_check_passed: bool,
        status: VerificationStatus | int,
        caller: str,
    ) -> Result[bool]:
        """
        Record a verification outcome for a provider.

        Overwrites background_check_passed and verification_status with the
        supplied values, with no transition check.

        Args:
            provider_id: Target provider id
            background_check_passed: Background check outcome
            status: New status (enum member or wire value 1/2/3)
            caller: Authenticated caller principal

        Returns:
            Ok(True), Err(UNAUTHORIZED) if caller is not a verifier (checked
            first), or Err(NOT_FOUND) if the provider does not exist

        Raises:
            ValueError: If status is not a VerificationStatus value
        """
        status = VerificationStatus(status)

        with self._write_lock:
            if not self.store.is_verifier(caller):
                error = ErrorCode.UNAUTHORIZED
            elif not self.store.update_verification(provider_id, background_check_passed, status):
                error = ErrorCode.NOT_FOUND
            else:
                error = None

        if error is not None:
            logger.warning(
                "Verification rejected: provider=%s caller=%s code=%s",
                provider_id,
                caller,
                error.value,
            )
            return Err(error)

        logger.info(
            "Provider verified: id=%s status=%s background_check_passed=%s by=%s",
            provider_id,
            status.name,
            background_check_passed,
            caller,
        )
        return Ok(True)

    def get_provider(self, provider_id: int) -> Provider | None:
        return self.store.get_provider(provider_id)

    def get_provider_id(self, principal: str) -> int | None:
        return self.store.get_provider_id(principal)

    def is_provider_verified(self, provider_id: int) -> bool:
        """True iff the provider exists and its status is VERIFIED."""
        provider = self.store.get_provider(provider_id)
        if provider is None:
            return False
        return provider.verification_status == VerificationStatus.VERIFIED

    def is_verifier(self, principal: str) -> bool:
        return self.store.is_verifier(principal)

    def verifiers(self) -> frozenset[str]:
        return self.store.list_verifiers()

    def provider_count(self) -> int:
        return self.store.provider_count()
