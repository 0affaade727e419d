"""
ic_messaging — async Python client for the IC messaging canister.

Wraps an ic-py agent behind a small facade: initialize once, authorize with a
project key, then send, read, edit and moderate messages on the canister.
"""

from ic_messaging.client import IcMessagingClient
from ic_messaging.core.exceptions import (
    CanisterRejectedError,
    MessagingClientError,
    NotAuthorizedError,
    NotInitializedError,
    RootKeyUnavailableError,
)
from ic_messaging.models import Message

__version__ = "0.1.0"

__all__ = [
    "CanisterRejectedError",
    "IcMessagingClient",
    "Message",
    "MessagingClientError",
    "NotAuthorizedError",
    "NotInitializedError",
    "RootKeyUnavailableError",
]
