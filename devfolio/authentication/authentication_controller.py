from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from devfolio.common.api_endpoints import (
    AUTH_SESSION_ENDPOINT,
    AUTH_SIGN_IN_ENDPOINT,
    AUTH_SIGN_OUT_ENDPOINT,
    AUTH_SIGN_UP_ENDPOINT,
)
from devfolio.common.fast_api_response_wrapper import api_response
from devfolio.dto.auth_dto import SessionStatusDto, SignInRequestDto, SignUpRequestDto
from devfolio.utils.permission_decorators import authenticate
from http import HTTPStatus


class AuthenticationController:
    """
    Controller for the sign-in / sign-up entry point and session status.

    Provider failures raise IdentityProviderError, which the global handler
    answers with 401 and the provider's message.
    """

    def __init__(self, identity_provider_client):
        """
        Args:
            identity_provider_client (IdentityProviderClient): Client for the hosted identity provider.
        """
        self.router = APIRouter(tags=["authentication"])
        self.identity_provider_client = identity_provider_client

        self.router.add_api_route(
            AUTH_SIGN_IN_ENDPOINT, self.sign_in, methods=["POST"], response_model=None
        )
        self.router.add_api_route(
            AUTH_SIGN_UP_ENDPOINT, self.sign_up, methods=["POST"], response_model=None
        )
        self.router.add_api_route(
            AUTH_SIGN_OUT_ENDPOINT,
            authenticate()(self.sign_out),
            methods=["POST"],
            response_model=None,
        )
        self.router.add_api_route(
            AUTH_SESSION_ENDPOINT, self.get_session, methods=["GET"], response_model=None
        )

    def sign_in(self, body: SignInRequestDto):
        session = self.identity_provider_client.sign_in(body.email, body.password)
        return api_response(message="Signed in successfully", data={"session": session})

    def sign_up(self, body: SignUpRequestDto):
        session = self.identity_provider_client.sign_up(
            body.email, body.password, body.display_name
        )
        return api_response(
            message="Account created successfully! You can now sign in.",
            data={"session": session},
            status_code=HTTPStatus.CREATED,
        )

    async def sign_out(self, request: Request):
        token = request.headers.get("Authorization", "").split(" ", 1)[-1]
        await run_in_threadpool(self.identity_provider_client.sign_out, token)
        return api_response(message="Signed out successfully")

    async def get_session(self, request: Request):
        """
        Report `currentOwnerId()` and `isAuthenticated()` for the caller.
        """
        user = getattr(request.state, "user", None)
        status = SessionStatusDto(
            owner_id=user.owner_id if user else None,
            is_authenticated=user is not None,
        )
        return api_response(message="Successfully", data={"session": status})
