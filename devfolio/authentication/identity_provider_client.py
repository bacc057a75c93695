import requests

from devfolio.common.constants import IDENTITY_REQUEST_TIMEOUT_SECONDS
from devfolio.common.exceptions import IdentityProviderError
from devfolio.dto.auth_dto import AuthSessionDto


class IdentityProviderClient:
    """
    Client for the hosted identity provider's REST API.

    Supports password sign-in, sign-up with a display name and sign-out.
    Failures surface as IdentityProviderError carrying a human-readable
    message suitable for showing inline on the authentication form.
    """

    def __init__(self, auth_url: str | None, api_key: str | None, logger):
        """
        Args:
            auth_url (str | None): Base URL of the provider, e.g. "https://<project>/auth/v1".
            api_key (str | None): Project key sent with every request.
            logger: The logger instance for logging messages.
        """
        self.auth_url = (auth_url or "").rstrip("/")
        self.api_key = api_key or ""
        self.logger = logger

    def sign_in(self, email: str, password: str) -> AuthSessionDto:
        """
        Exchange email and password for a session.

        Returns:
            AuthSessionDto: Owner id and tokens of the new session.
        """
        payload = self._post(
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        user = payload.get("user") or {}
        self.logger.info("[IdentityProviderClient] signed in owner %s", user.get("id"))
        return AuthSessionDto(
            owner_id=user.get("id", ""),
            email=user.get("email", email),
            access_token=payload.get("access_token"),
            refresh_token=payload.get("refresh_token"),
            expires_in=payload.get("expires_in"),
        )

    def sign_up(self, email: str, password: str, display_name: str) -> AuthSessionDto:
        """
        Register a new account. The display name is stored as user metadata.

        The provider may or may not return a session, depending on whether
        email confirmation is required.
        """
        payload = self._post(
            "/signup",
            json={
                "email": email,
                "password": password,
                "data": {"full_name": display_name},
            },
        )
        user = payload.get("user") or payload
        self.logger.info("[IdentityProviderClient] signed up owner %s", user.get("id"))
        return AuthSessionDto(
            owner_id=user.get("id", ""),
            email=user.get("email", email),
            access_token=payload.get("access_token"),
            refresh_token=payload.get("refresh_token"),
            expires_in=payload.get("expires_in"),
        )

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind `access_token`."""
        self._post(
            "/logout",
            headers={"Authorization": f"Bearer {access_token}"},
        )
        self.logger.info("[IdentityProviderClient] signed out a session")

    def _post(self, path: str, params=None, json=None, headers=None) -> dict:
        if not self.auth_url:
            raise IdentityProviderError("Identity provider is not configured")

        request_headers = {"apikey": self.api_key}
        request_headers.update(headers or {})
        try:
            response = requests.post(
                f"{self.auth_url}{path}",
                params=params,
                json=json,
                headers=request_headers,
                timeout=IDENTITY_REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            self.logger.error(
                "[IdentityProviderClient] request to %s failed: %s", path, str(e)
            )
            raise IdentityProviderError(
                "Could not reach the identity provider. Please try again."
            ) from e

        if not response.ok:
            message = self._error_message(response)
            self.logger.warning(
                "[IdentityProviderClient] %s rejected with %s: %s",
                path,
                response.status_code,
                message,
            )
            raise IdentityProviderError(message)

        if not response.content:
            return {}
        return response.json()

    def _error_message(self, response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = {}
        for key in ("error_description", "msg", "message", "error"):
            if body.get(key):
                return str(body[key])
        return f"Authentication request failed ({response.status_code})"
