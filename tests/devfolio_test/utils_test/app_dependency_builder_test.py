import os
from unittest import TestCase, main
from unittest.mock import patch

from devfolio.common.environment_constants import (
    AUTH_API_KEY,
    AUTH_JWT_AUDIENCE,
    AUTH_JWT_SECRET,
    AUTH_URL,
    DATABASE_URL,
)
from devfolio.utils.app_dependency_builder import AppDependencyBuilder
from devfolio.utils.fast_app_factory import FastAppFactory

TEST_ENV = {
    DATABASE_URL: "sqlite+aiosqlite:///portfolio.db",
    AUTH_URL: "https://project.example.com/auth/v1",
    AUTH_API_KEY: "project-key",
    AUTH_JWT_SECRET: "jwt-secret",
    AUTH_JWT_AUDIENCE: "portfolio",
}


class TestAppDependencyBuilder(TestCase):
    @patch.dict(os.environ, TEST_ENV)
    def test_builder_reads_configuration(self):
        builder = AppDependencyBuilder()

        self.assertEqual(builder.database.database_url, TEST_ENV[DATABASE_URL])
        self.assertEqual(
            builder.identity_provider_client.auth_url, TEST_ENV[AUTH_URL]
        )
        self.assertEqual(builder.identity_provider_client.api_key, "project-key")
        self.assertEqual(builder.authentication_service.jwt_secret, "jwt-secret")
        self.assertEqual(builder.authentication_service.audience, "portfolio")

    @patch.dict(os.environ, TEST_ENV)
    def test_builder_shares_dependencies(self):
        builder = AppDependencyBuilder()

        self.assertIs(builder.entity_store.database, builder.database)
        self.assertIs(
            builder.portfolio_aggregator.entity_store, builder.entity_store
        )
        self.assertIs(
            builder.entity_command_service.entity_store, builder.entity_store
        )
        self.assertIs(
            builder.editor_controller.portfolio_aggregator,
            builder.portfolio_aggregator,
        )
        self.assertIsInstance(builder.fast_app_factory, FastAppFactory)
        self.assertIs(
            builder.fast_app_factory.authentication_service,
            builder.authentication_service,
        )

    @patch("devfolio.utils.app_dependency_builder.get_logger")
    def test_builder_does_not_connect_without_database_url(self, mock_get_logger):
        with patch.dict(os.environ, {}, clear=True):
            builder = AppDependencyBuilder()

        mock_get_logger.assert_called_once()
        self.assertIsNone(builder.database.database_url)
        self.assertEqual(builder.authentication_service.audience, "authenticated")
        with self.assertRaises(ValueError):
            builder.database.get_engine()


if __name__ == "__main__":
    main()
