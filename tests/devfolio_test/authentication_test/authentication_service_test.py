from unittest import TestCase, main
from unittest.mock import MagicMock
from datetime import datetime, timedelta, timezone

import jwt
from starlette.datastructures import Headers

from devfolio.authentication.authentication_service import AuthenticationService

JWT_SECRET = "test-secret-with-enough-length-for-hs256"
OWNER_ID = "3f0c6a9e-0000-4000-8000-000000000001"


def make_token(secret=JWT_SECRET, audience="authenticated", **claims):
    payload = {
        "sub": OWNER_ID,
        "email": "ada@example.com",
        "aud": audience,
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


class TestAuthenticationService(TestCase):
    def setUp(self):
        self.logger = MagicMock()
        self.service = AuthenticationService(jwt_secret=JWT_SECRET, logger=self.logger)

    def test_no_header_is_anonymous(self):
        self.assertIsNone(self.service.authenticate_request(Headers({})))

    def test_valid_token(self):
        headers = Headers({"Authorization": f"Bearer {make_token()}"})

        user = self.service.authenticate_request(headers)

        self.assertEqual(user.sub, OWNER_ID)
        self.assertEqual(user.owner_id, OWNER_ID)
        self.assertEqual(user.primary_email, "ada@example.com")

    def test_unsupported_scheme(self):
        with self.assertRaises(ValueError):
            self.service.authenticate_request(Headers({"Authorization": "Basic abc"}))

    def test_wrong_secret(self):
        token = make_token(secret="another-secret-with-enough-length-too")

        with self.assertRaises(ValueError) as ctx:
            self.service.verify_token(token)

        self.assertTrue(str(ctx.exception).startswith("Access Token Invalid"))
        self.logger.warning.assert_called_once()

    def test_expired_token(self):
        token = make_token(exp=datetime.now(timezone.utc) - timedelta(minutes=1))

        with self.assertRaises(ValueError):
            self.service.verify_token(token)

    def test_wrong_audience(self):
        with self.assertRaises(ValueError):
            self.service.verify_token(make_token(audience="anon"))

    def test_custom_audience(self):
        service = AuthenticationService(
            jwt_secret=JWT_SECRET, logger=self.logger, audience="portfolio"
        )

        user = service.verify_token(make_token(audience="portfolio"))

        self.assertEqual(user.sub, OWNER_ID)

    def test_missing_subject(self):
        with self.assertRaises(ValueError):
            self.service.verify_token(make_token(sub=""))

    def test_unconfigured_secret(self):
        service = AuthenticationService(jwt_secret=None, logger=self.logger)

        with self.assertRaises(ValueError):
            service.verify_token(make_token())


if __name__ == "__main__":
    main()
