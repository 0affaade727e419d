"""
Client-side exceptions.

Only precondition failures are raised locally. Errors coming back from the
canister or the HTTP layer are re-raised as-is by the facade.
"""

from __future__ import annotations


class MessagingClientError(Exception):
    """Base class for errors raised by the client itself."""

    code = "client_error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message())

    @classmethod
    def default_message(cls) -> str:
        return "IC messaging client error"


class NotInitializedError(MessagingClientError):
    """Raised when a call needs a connection or service handle that does not exist yet."""

    code = "not_initialized"

    @classmethod
    def default_message(cls) -> str:
        return "Client not initialized. Call initialize() first."


class NotAuthorizedError(MessagingClientError):
    """Raised when a message operation is attempted before a successful authorize()."""

    code = "not_authorized"

    @classmethod
    def default_message(cls) -> str:
        return "Not authorized. Please call authorize(project, key) first with valid credentials."


class RootKeyUnavailableError(MessagingClientError):
    """Raised when the local replica status reply carries no root key."""

    code = "root_key_unavailable"

    @classmethod
    def default_message(cls) -> str:
        return "Replica status did not include a root_key"


class CanisterRejectedError(MessagingClientError):
    """Raised when the canister rejects a query; ic-py returns these as a bare reject message."""

    code = "canister_rejected"

    def __init__(self, method: str, reject_message: str):
        self.method = method
        self.reject_message = reject_message
        super().__init__(f"{method} rejected: {reject_message}")
