from fastapi import FastAPI
from devfolio.common.fast_api_error_handler import register_exception_handlers
from devfolio.utils.auth_middleware import AuthMiddleware


class FastAppFactory:
    """
    Factory class for creating and configuring the portfolio FastAPI application.

    This class encapsulates the setup of the FastAPI app, including
    routing, middleware and exception handling.
    """

    def __init__(
        self,
        authentication_controller,
        authentication_service,
        portfolio_controller,
        editor_controller,
    ):
        """
        Initialize the factory.

        Args:
            authentication_controller: Controller instance responsible for sign-in, sign-up and sign-out routes.
            authentication_service: AuthenticationService instance used by middleware to resolve the caller.
            portfolio_controller: PortfolioController serving the public page and the dashboard.
            editor_controller: EditorController serving the dashboard editors.
        """
        self.authentication_controller = authentication_controller
        self.authentication_service = authentication_service
        self.portfolio_controller = portfolio_controller
        self.editor_controller = editor_controller

    def create_app(self, is_prod: bool = False) -> FastAPI:
        """
        Create and configure a FastAPI application instance.

        This method performs the following setup steps:
            1. Initializes the FastAPI application.
                - In production mode (is_prod=True), disables Swagger UI, ReDoc,
                    and the OpenAPI schema endpoints.
            2. Registers global exception handlers.
            3. Adds authentication middleware using AuthMiddleware.
            4. Registers the controller routes under the '/api' prefix.
            5. Adds a simple health check endpoint at '/fastapi/health'.

        Args:
            is_prod (bool): Whether the application is running in production mode.
                Defaults to False.

        Returns:
            FastAPI: A fully configured FastAPI application instance.
        """
        app = FastAPI(
            title="devfolio",
            docs_url=None if is_prod else "/docs",
            redoc_url=None if is_prod else "/redoc",
            openapi_url=None if is_prod else "/openapi.json",
        )

        register_exception_handlers(app)

        app.add_middleware(AuthMiddleware, auth_service=self.authentication_service)

        app.include_router(self.authentication_controller.router, prefix="/api")
        app.include_router(self.portfolio_controller.router, prefix="/api")
        app.include_router(self.editor_controller.router, prefix="/api")

        @app.get("/fastapi/health")
        def health_check():
            """
            Health check endpoint.

            Returns:
                dict: JSON containing the health status.
            """
            return {"status": "ok"}

        return app
