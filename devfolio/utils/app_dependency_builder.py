import os
from devfolio.common.logger import get_logger
from devfolio.common.database import Database
from devfolio.common.environment_constants import (
    AUTH_API_KEY,
    AUTH_JWT_AUDIENCE,
    AUTH_JWT_SECRET,
    AUTH_URL,
    DATABASE_URL,
)
from devfolio.repository.entity_store import EntityStore
from devfolio.portfolio.portfolio_mapper import PortfolioMapper
from devfolio.portfolio.portfolio_aggregator import PortfolioAggregator
from devfolio.portfolio.portfolio_renderer import PortfolioRenderer
from devfolio.portfolio.portfolio_controller import PortfolioController
from devfolio.editor.entity_command_service import EntityCommandService
from devfolio.editor.editor_controller import EditorController
from devfolio.authentication.identity_provider_client import IdentityProviderClient
from devfolio.authentication.authentication_service import AuthenticationService
from devfolio.authentication.authentication_controller import AuthenticationController
from devfolio.utils.fast_app_factory import FastAppFactory


class AppDependencyBuilder:
    """
    A builder class responsible for constructing all service and controller dependencies
    used throughout the application.

    Configuration is read from the environment once, here; no other module
    reads environment variables for wiring.

    Example:
        builder = AppDependencyBuilder()
        app = builder.fast_app_factory.create_app()
    """

    def __init__(self):
        database_url = os.getenv(DATABASE_URL)
        auth_url = os.getenv(AUTH_URL)
        auth_api_key = os.getenv(AUTH_API_KEY)
        auth_jwt_secret = os.getenv(AUTH_JWT_SECRET)
        auth_jwt_audience = os.getenv(AUTH_JWT_AUDIENCE)

        self.logger = get_logger()
        self.database = Database(database_url)

        self.entity_store = EntityStore(database=self.database, logger=self.logger)
        self.portfolio_mapper = PortfolioMapper()
        self.portfolio_aggregator = PortfolioAggregator(
            entity_store=self.entity_store,
            portfolio_mapper=self.portfolio_mapper,
            logger=self.logger,
        )
        self.portfolio_renderer = PortfolioRenderer()
        self.portfolio_controller = PortfolioController(
            portfolio_aggregator=self.portfolio_aggregator,
            portfolio_renderer=self.portfolio_renderer,
        )

        self.entity_command_service = EntityCommandService(
            entity_store=self.entity_store, logger=self.logger
        )
        self.editor_controller = EditorController(
            entity_command_service=self.entity_command_service,
            portfolio_aggregator=self.portfolio_aggregator,
            portfolio_renderer=self.portfolio_renderer,
            logger=self.logger,
        )

        self.identity_provider_client = IdentityProviderClient(
            auth_url=auth_url, api_key=auth_api_key, logger=self.logger
        )
        self.authentication_service = AuthenticationService(
            jwt_secret=auth_jwt_secret,
            logger=self.logger,
            audience=auth_jwt_audience,
        )
        self.authentication_controller = AuthenticationController(
            identity_provider_client=self.identity_provider_client
        )

        self.fast_app_factory = FastAppFactory(
            authentication_controller=self.authentication_controller,
            authentication_service=self.authentication_service,
            portfolio_controller=self.portfolio_controller,
            editor_controller=self.editor_controller,
        )
