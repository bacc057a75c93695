"""
Development ASGI entry point for the portfolio application.

This script performs the following steps:
1. Builds application dependencies via AppDependencyBuilder.
2. Creates the FastAPI application instance with all controllers/services injected.
3. Runs the application using Uvicorn ASGI server.
"""

import uvicorn
from devfolio.utils.app_dependency_builder import AppDependencyBuilder
from starlette.datastructures import Headers
from devfolio.authentication.authentication_service import AuthenticationService
from devfolio.dto.user_context_dto import UserContextDto

DEV_OWNER_ID = "00000000-0000-0000-0000-000000000001"


class DevAuthenticationService(AuthenticationService):
    """
    Authentication service used exclusively in development mode.

    Requests without a bearer token are treated as the fixed development owner
    so the dashboard can be used without an identity provider. Requests that
    do carry a token are still verified.
    """

    def authenticate_request(self, headers: Headers) -> UserContextDto:
        if headers.get("Authorization"):
            return super().authenticate_request(headers)
        return UserContextDto(sub=DEV_OWNER_ID, primary_email="owner@dev.local")


# Build application dependencies
builder = AppDependencyBuilder()

# Only use this in local development environments, never in production.
dev_auth_service = DevAuthenticationService(jwt_secret=None, logger=builder.logger)
builder.fast_app_factory.authentication_service = dev_auth_service

# Create FastAPI app with injected dependencies
app = builder.fast_app_factory.create_app()
# Run the ASGI server (development mode)
if __name__ == "__main__":
    uvicorn.run(
        "devfolio.fast_app_dev_runner:app", host="0.0.0.0", port=5001, reload=True
    )
