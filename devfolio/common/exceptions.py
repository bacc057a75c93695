class EntityStoreError(RuntimeError):
    """Raised when a read or write against the hosted database fails."""


class EntityNotFoundError(LookupError):
    """Raised when an owned row cannot be found for the session owner."""


class IdentityProviderError(Exception):
    """
    Raised when the identity provider rejects a sign-in, sign-up or sign-out.

    The message is always human-readable so it can be shown inline on the
    authentication form.
    """


class DeleteNotConfirmedError(ValueError):
    """Raised when a delete is requested without the explicit confirmation flag."""
