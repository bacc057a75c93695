import jwt
from starlette.datastructures import Headers

from devfolio.common.constants import DEFAULT_JWT_AUDIENCE
from devfolio.dto.user_context_dto import UserContextDto


class AuthenticationService:
    """
    Verifies access tokens issued by the identity provider.

    Requests without credentials are anonymous; requests with a bearer token
    must carry a valid HS256 JWT whose `sub` claim is the owner id.
    """

    def __init__(self, jwt_secret: str | None, logger, audience: str | None = None):
        """
        Args:
            jwt_secret (str | None): Shared secret used to sign access tokens.
            logger: A logger instance.
            audience (str | None): Expected `aud` claim; defaults to "authenticated".
        """
        self.jwt_secret = jwt_secret
        self.audience = audience or DEFAULT_JWT_AUDIENCE
        self.logger = logger

    def authenticate_request(self, headers: Headers) -> UserContextDto | None:
        """
        Resolve the caller from the `Authorization` header.

        Returns:
            UserContextDto | None: The session owner, or None for anonymous callers.

        Raises:
            ValueError: If a token is present but malformed or invalid.
        """
        auth_header = headers.get("Authorization")
        if not auth_header:
            return None
        if not auth_header.startswith("Bearer "):
            raise ValueError("Unsupported authorization scheme")

        token = auth_header.split(" ", 1)[1].strip()
        return self.verify_token(token)

    def verify_token(self, token: str) -> UserContextDto:
        """
        Decode and verify an access token.

        Raises:
            ValueError: If the token cannot be verified or has no subject.
        """
        if not self.jwt_secret:
            raise ValueError("Token verification is not configured")
        try:
            payload = jwt.decode(
                token,
                key=self.jwt_secret,
                algorithms=["HS256"],
                audience=self.audience,
            )
        except jwt.PyJWTError as e:
            self.logger.warning("[AuthenticationService] invalid token: %s", str(e))
            raise ValueError(f"Access Token Invalid: {str(e)}")

        sub = payload.get("sub")
        if not sub:
            raise ValueError("Access Token Invalid: missing subject")
        return UserContextDto(sub=sub, primary_email=payload.get("email") or "")
