"""
API error handling - Maps domain errors to HTTP responses.

Routes surface Err results by calling unwrap(), which raises a
RegistryError. The handler installed here turns it into a JSON body
carrying both a message and the registry error code.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from provider_registry.domain.exceptions import RegistryError
from provider_registry.domain.ports import ErrorCode

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.UNAUTHORIZED: "Caller is not authorized for this operation",
    ErrorCode.ALREADY_REGISTERED: "Principal already registered a provider",
    ErrorCode.NOT_FOUND: "Provider not found",
}


def http_status_for(code: ErrorCode) -> int:
    return _STATUS_CODES[code]


async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    """
    Render a RegistryError as {"detail": ..., "code": ...}.

    The client always gets the fixed message for the code; exc.detail is
    only logged.
    """
    logger.debug(
        "Registry error on %s %s: %s (%s)",
        request.method,
        request.url.path,
        exc.code.name,
        exc.detail,
    )
    return JSONResponse(
        status_code=http_status_for(exc.code),
        content={"detail": _MESSAGES[exc.code], "code": exc.code.value},
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register the domain exception handler on an application."""
    app.add_exception_handler(RegistryError, registry_error_handler)
