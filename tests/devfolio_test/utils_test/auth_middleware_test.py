import unittest
from unittest.mock import MagicMock
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient
from http import HTTPStatus

from devfolio.dto.user_context_dto import UserContextDto
from devfolio.utils.auth_middleware import AuthMiddleware


class TestAuthMiddleware(unittest.TestCase):
    def setUp(self):
        self.mock_auth_service = MagicMock()

        async def whoami(request):
            user = request.state.user
            return JSONResponse({"owner": user.owner_id if user else None})

        self.app = Starlette(routes=[Route("/whoami", whoami)])
        self.app.add_middleware(AuthMiddleware, auth_service=self.mock_auth_service)
        self.client = TestClient(self.app)

    def test_authenticated_caller(self):
        self.mock_auth_service.authenticate_request.return_value = UserContextDto(
            sub="owner-1", primary_email="ada@example.com"
        )

        response = self.client.get(
            "/whoami", headers={"Authorization": "Bearer valid_token"}
        )

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.json(), {"owner": "owner-1"})
        self.mock_auth_service.authenticate_request.assert_called_once()

    def test_anonymous_caller_passes_through(self):
        self.mock_auth_service.authenticate_request.return_value = None

        response = self.client.get("/whoami")

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.json(), {"owner": None})

    def test_invalid_token(self):
        self.mock_auth_service.authenticate_request.side_effect = ValueError(
            "Access Token Invalid: Signature verification failed"
        )

        response = self.client.get("/whoami", headers={"Authorization": "Bearer bad"})

        self.assertEqual(response.status_code, HTTPStatus.UNAUTHORIZED)
        self.assertEqual(
            response.json()["message"],
            "Access Token Invalid: Signature verification failed",
        )
        self.assertFalse(response.json()["success"])

    def test_unexpected_failure(self):
        self.mock_auth_service.authenticate_request.side_effect = Exception("boom")

        response = self.client.get("/whoami", headers={"Authorization": "Bearer x"})

        self.assertEqual(response.status_code, HTTPStatus.FORBIDDEN)
        self.assertEqual(response.json()["message"], "Authentication failed")


if __name__ == "__main__":
    unittest.main()
