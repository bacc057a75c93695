from http import HTTPStatus
from devfolio.common.exceptions import EntityNotFoundError, IdentityProviderError
from devfolio.common.fast_api_response_wrapper import api_response
from devfolio.common.logger import get_logger
from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError

logger = get_logger()


def _status_for(exc: Exception) -> HTTPStatus:
    match exc:
        case ValueError() | RequestValidationError():
            return HTTPStatus.BAD_REQUEST
        case EntityNotFoundError():
            return HTTPStatus.NOT_FOUND
        case IdentityProviderError():
            return HTTPStatus.UNAUTHORIZED
        case RuntimeError():
            return HTTPStatus.SERVICE_UNAVAILABLE
        case _:
            return HTTPStatus.INTERNAL_SERVER_ERROR


async def global_exception_handler(request: Request, exc: Exception):
    """
    Convert any exception escaping a route into the standard API envelope.

    The logged message always carries the raw error; the user-facing message
    hides details of server errors and flattens validation errors to their
    first entry.
    """
    status = _status_for(exc)

    # /api/<section>/... -> section, used to tag the log line.
    parts = request.url.path.strip("/").split("/")
    section = parts[1] if len(parts) > 1 else "unknown"
    is_server_error = status >= 500

    if is_server_error:
        user_message = "Internal Server Error. Please contact support."
    elif isinstance(exc, RequestValidationError):
        first_error = exc.errors()[0]
        user_message = (
            f"Validation Error: {first_error.get('loc', [])[-1]} - "
            f"{first_error.get('msg')}"
        )
    else:
        user_message = str(exc)

    log_method = logger.error if is_server_error else logger.warning
    log_method(
        "[%s] %s on section [%s]: %s",
        "Server Error" if is_server_error else "Client Error",
        type(exc).__name__,
        section,
        str(exc),
        exc_info=is_server_error,
    )

    return api_response(
        success=False,
        message=user_message,
        status_code=status,
    )


def register_exception_handlers(app: FastAPI):
    """
    Register the global exception handler on the FastAPI application.

    Client-side exception types are registered explicitly so that they are
    answered by the exception middleware instead of the server-error middleware.
    """
    for exc_cls in (
        Exception,
        RequestValidationError,
        ValueError,
        EntityNotFoundError,
        IdentityProviderError,
        RuntimeError,
    ):
        app.add_exception_handler(exc_cls, global_exception_handler)
