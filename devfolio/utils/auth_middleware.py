from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from devfolio.common.fast_api_response_wrapper import api_response
from http import HTTPStatus


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Resolves the caller of every request.

    `request.state.user` is set to the authenticated `UserContextDto`, or to
    None for anonymous callers so that public routes keep working. A token
    that is present but invalid is rejected before reaching any route.

    Usage:
        app.add_middleware(AuthMiddleware, auth_service=auth_service)

    Exception Handling:
        - ValueError: Returns HTTP 401 UNAUTHORIZED with the error message.
        - Other exceptions: Returns HTTP 403 FORBIDDEN with "Authentication failed".
    """

    def __init__(self, app, auth_service):
        super().__init__(app)
        self.auth_service = auth_service

    async def dispatch(self, request: Request, call_next):
        try:
            request.state.user = self.auth_service.authenticate_request(
                request.headers
            )
        except ValueError as e:
            return api_response(
                success=False,
                message=str(e),
                status_code=HTTPStatus.UNAUTHORIZED,
            )
        except Exception:
            return api_response(
                success=False,
                message="Authentication failed",
                status_code=HTTPStatus.FORBIDDEN,
            )

        return await call_next(request)
