import inspect
import unittest
from unittest.mock import MagicMock, patch
from http import HTTPStatus
from starlette.requests import Request

from devfolio.dto.user_context_dto import UserContextDto
from devfolio.utils.permission_decorators import authenticate


class TestAuthenticateDecorator(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        patcher = patch("devfolio.utils.permission_decorators.api_response")
        self.mock_api_response = patcher.start()
        self.addCleanup(patcher.stop)

        def fake_api_response(*args, **kwargs):
            resp = MagicMock()
            resp.status_code = kwargs.get("status_code")
            return resp

        self.mock_api_response.side_effect = fake_api_response
        self.mock_request = MagicMock(spec=Request)
        self.mock_request.state = MagicMock()

        self.user = UserContextDto(sub="owner-1", primary_email="ada@example.com")

    async def test_no_user_in_state_returns_401(self):
        self.mock_request.state.user = None

        @authenticate()
        async def dummy_func():
            return "success"

        response = await dummy_func(request=self.mock_request)

        self.assertEqual(response.status_code, HTTPStatus.UNAUTHORIZED)

    async def test_authenticated_user_calls_func(self):
        self.mock_request.state.user = self.user

        @authenticate()
        async def dummy_func():
            return "called"

        self.assertEqual(await dummy_func(request=self.mock_request), "called")

    async def test_inject_current_user(self):
        self.mock_request.state.user = self.user

        @authenticate()
        async def dummy_func(current_user):
            return current_user

        self.assertIs(await dummy_func(request=self.mock_request), self.user)

    async def test_inject_owner_id_from_session(self):
        self.mock_request.state.user = self.user

        @authenticate()
        async def dummy_func(section, owner_id):
            return section, owner_id

        result = await dummy_func(request=self.mock_request, section="skills")

        self.assertEqual(result, ("skills", "owner-1"))

    async def test_inject_request(self):
        self.mock_request.state.user = self.user

        @authenticate()
        async def dummy_func(request):
            return request

        self.assertIs(await dummy_func(request=self.mock_request), self.mock_request)

    def test_signature_hides_injected_params(self):
        @authenticate()
        async def dummy_func(section: str, current_user, owner_id):
            return None

        params = list(inspect.signature(dummy_func).parameters)

        self.assertEqual(params, ["request", "section"])


if __name__ == "__main__":
    unittest.main()
