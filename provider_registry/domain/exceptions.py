"""
Domain exceptions - Semantic error types for the provider registry.

The registry service returns error codes instead of raising. These
exceptions are how outer layers surface an Err result (see
Result.unwrap), so each one carries its ErrorCode.
"""

from .ports import ErrorCode


class RegistryError(Exception):
    """Base class for registry domain errors."""

    code: ErrorCode

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.code.name)
        self.detail = detail or self.code.name


class Unauthorized(RegistryError):
    """Caller lacks the required role (admin or verifier)."""

    code = ErrorCode.UNAUTHORIZED


class AlreadyRegistered(RegistryError):
    """Caller principal already owns a provider record."""

    code = ErrorCode.ALREADY_REGISTERED


class ProviderNotFound(RegistryError):
    """Referenced provider id does not exist."""

    code = ErrorCode.NOT_FOUND


_EXCEPTIONS: dict[ErrorCode, type[RegistryError]] = {
    ErrorCode.UNAUTHORIZED: Unauthorized,
    ErrorCode.ALREADY_REGISTERED: AlreadyRegistered,
    ErrorCode.NOT_FOUND: ProviderNotFound,
}


def error_for(code: ErrorCode, detail: str = "") -> RegistryError:
    """Build the exception matching an error code."""
    return _EXCEPTIONS[code](detail)
