"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic of the provider registry:
self-registration, admin-delegated verifier authority, and verification
attestation. It defines its own port interfaces for storage abstraction,
keeping the core independent of HTTP and database frameworks.
"""

from .exceptions import AlreadyRegistered, ProviderNotFound, RegistryError, Unauthorized
from .ports import ErrorCode, Provider, RegistryStore, VerificationStatus
from .registry import ProviderRegistry
from .result import Err, Ok, Result

__all__ = [
    "AlreadyRegistered",
    "Err",
    "ErrorCode",
    "Ok",
    "Provider",
    "ProviderNotFound",
    "ProviderRegistry",
    "RegistryError",
    "RegistryStore",
    "Result",
    "Unauthorized",
    "VerificationStatus",
]
