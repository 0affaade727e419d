"""
Callable-service layer: the canister's eight operations as a typed interface.

MessagingService describes what the facade needs; CanisterMessagingService
implements it on top of ic-py's Canister, which owns Candid encoding and
transport. Replies are unwrapped to plain Python values, nothing more.
"""

from __future__ import annotations

from typing import Any, Protocol

from ic_messaging.agent import CanisterConnection
from ic_messaging.core.exceptions import CanisterRejectedError
from ic_messaging.idl import MESSAGING_DID


class MessagingService(Protocol):
    """One coroutine per remote canister operation."""

    async def send_message(self, sender: str, receiver: str, content: str) -> bool: ...

    async def receive_messages(self, user: str) -> list[dict[str, Any]]: ...

    async def edit_message(self, address: str, index: int, new_content: str) -> bool: ...

    async def delete_user_messages(self, address: str) -> bool: ...

    async def clear_messages(self) -> bool: ...

    async def harassment_level(self, content: str) -> str: ...

    async def suggest_improved_message(self, content: str) -> str: ...

    async def validate_key(self, project: str, key: str) -> bool: ...


def _unwrap(method: str, reply: Any) -> Any:
    """
    Reduce an ic-py reply to the single return value.

    Canister methods yield a list of decoded return values on success. A
    rejected query comes back as the bare reject message instead of a list;
    rejected updates already raise inside ic-py.
    """
    if not isinstance(reply, list):
        raise CanisterRejectedError(method, str(reply))
    if len(reply) != 1:
        raise ValueError(f"Expected exactly one return value from {method}, got {len(reply)}")
    return reply[0]


class CanisterMessagingService:
    """MessagingService backed by an ic-py Canister proxy."""

    def __init__(self, connection: CanisterConnection, canister_id: str, *, candid: str = MESSAGING_DID) -> None:
        from ic.canister import Canister

        self.canister_id = canister_id
        self._canister = Canister(agent=connection.agent, canister_id=canister_id, candid=candid)

    async def _invoke(self, method: str, *args: Any) -> Any:
        # ic-py exposes every service method as <name> (sync) and <name>_async
        call = getattr(self._canister, f"{method}_async")
        return _unwrap(method, await call(*args))

    async def send_message(self, sender: str, receiver: str, content: str) -> bool:
        return await self._invoke("sendMessage", sender, receiver, content)

    async def receive_messages(self, user: str) -> list[dict[str, Any]]:
        return list(await self._invoke("receiveMessages", user))

    async def edit_message(self, address: str, index: int, new_content: str) -> bool:
        return await self._invoke("editMessage", address, index, new_content)

    async def delete_user_messages(self, address: str) -> bool:
        return await self._invoke("deleteUserMessages", address)

    async def clear_messages(self) -> bool:
        return await self._invoke("clearMessages")

    async def harassment_level(self, content: str) -> str:
        return await self._invoke("harassmentLevel", content)

    async def suggest_improved_message(self, content: str) -> str:
        return await self._invoke("suggestImprovedMessage", content)

    async def validate_key(self, project: str, key: str) -> bool:
        return await self._invoke("validateKey", project, key)
