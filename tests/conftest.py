"""
Pytest fixtures for ic_messaging tests. Fake connection and service stand in
for ic-py so no network is touched; IC_* env vars are cleared per test.
"""

from __future__ import annotations

from typing import Any

import pytest

from ic_messaging import IcMessagingClient

TEST_CANISTER_ID = "rrkah-fqaaa-aaaaa-aaaaq-cai"
TEST_HOST = "http://127.0.0.1:4943"


class FakeConnection:
    """Records root-key bootstraps and returns a canned status map."""

    def __init__(self, host: str, status_reply: dict[str, Any] | None = None) -> None:
        self.host = host
        self.root_key: bytes | None = None
        self.root_key_fetches = 0
        self.status_reply = status_reply or {"ic_api_version": "0.18.0", "replica_health_status": "healthy"}
        self.status_error: Exception | None = None

    async def status(self) -> dict[str, Any]:
        if self.status_error is not None:
            raise self.status_error
        return self.status_reply

    async def fetch_root_key(self) -> bytes:
        self.root_key_fetches += 1
        self.root_key = b"\x30" * 133
        return self.root_key


class FakeService:
    """In-memory MessagingService; `errors[name]` makes that operation raise."""

    def __init__(self, connection: Any = None, canister_id: str = TEST_CANISTER_ID) -> None:
        self.connection = connection
        self.canister_id = canister_id
        self.valid_keys: dict[str, str] = {"proj": "secret"}
        self.messages: list[dict[str, Any]] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.errors: dict[str, Exception] = {}
        self.next_timestamp = 1_750_486_429_293_560_682

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if name in self.errors:
            raise self.errors[name]

    async def send_message(self, sender: str, receiver: str, content: str) -> bool:
        self._record("send_message", sender, receiver, content)
        self.messages.append(
            {"sender": sender, "receiver": receiver, "content": content, "timestamp": self.next_timestamp}
        )
        return True

    async def receive_messages(self, user: str) -> list[dict[str, Any]]:
        self._record("receive_messages", user)
        return [m for m in self.messages if m["receiver"] == user]

    async def edit_message(self, address: str, index: int, new_content: str) -> bool:
        self._record("edit_message", address, index, new_content)
        own = [m for m in self.messages if m["sender"] == address]
        if index >= len(own):
            return False
        own[index]["content"] = new_content
        return True

    async def delete_user_messages(self, address: str) -> bool:
        self._record("delete_user_messages", address)
        before = len(self.messages)
        self.messages = [m for m in self.messages if m["sender"] != address]
        return len(self.messages) != before

    async def clear_messages(self) -> bool:
        self._record("clear_messages")
        self.messages = []
        return True

    async def harassment_level(self, content: str) -> str:
        self._record("harassment_level", content)
        return "low"

    async def suggest_improved_message(self, content: str) -> str:
        self._record("suggest_improved_message", content)
        return f"Kindly: {content}"

    async def validate_key(self, project: str, key: str) -> bool:
        self._record("validate_key", project, key)
        return self.valid_keys.get(project) == key


@pytest.fixture(autouse=True)
def clean_ic_env(monkeypatch):
    """Unset IC_* vars so settings defaults are deterministic."""
    for name in ("IC_CANISTER_ID", "IC_HOST", "IC_LOCAL", "IC_STATUS_TIMEOUT_SEC"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_service():
    return FakeService()


@pytest.fixture
def fake_connection():
    return FakeConnection(TEST_HOST)


@pytest.fixture
def make_client(fake_service, fake_connection):
    """Build an uninitialized client wired to the fakes."""

    def _make(**kwargs: Any) -> IcMessagingClient:
        kwargs.setdefault("canister_id", TEST_CANISTER_ID)
        kwargs.setdefault("host", TEST_HOST)
        kwargs.setdefault("is_local", False)

        def connection_factory(settings):
            fake_connection.host = settings.host
            return fake_connection

        def service_factory(connection, canister_id):
            fake_service.connection = connection
            fake_service.canister_id = canister_id
            return fake_service

        return IcMessagingClient(
            connection_factory=connection_factory,
            service_factory=service_factory,
            **kwargs,
        )

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
