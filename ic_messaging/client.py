"""
IC messaging client facade.

Usage:
    client = IcMessagingClient()
    await client.initialize()
    if await client.authorize("machu", project_key):
        await client.send_message(sender, receiver, "Hello, how are you?")
        messages = await client.receive_messages(receiver)

Every remote call goes through the MessagingService built at initialize().
Failures from the canister are logged and re-raised unchanged; nothing is
retried.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from ic_messaging.agent import CanisterConnection
from ic_messaging.config.settings import ClientSettings
from ic_messaging.guards import authorized, connection_ready, requires, service_ready
from ic_messaging.logging import get_logger
from ic_messaging.models import Message
from ic_messaging.service import CanisterMessagingService, MessagingService

logger = get_logger(__name__)

ConnectionFactory = Callable[[ClientSettings], CanisterConnection]
ServiceFactory = Callable[[CanisterConnection, str], MessagingService]


def _default_connection(settings: ClientSettings) -> CanisterConnection:
    return CanisterConnection(settings.host, timeout_sec=settings.status_timeout_sec)


class IcMessagingClient:
    """
    Async facade over the messaging canister.

    One instance per logical client. initialize() builds the connection and
    service handles; authorize() unlocks the message operations. Concurrent
    initialize()/authorize() calls on the same instance are not serialized.
    """

    def __init__(
        self,
        canister_id: str | None = None,
        *,
        host: str | None = None,
        is_local: bool | None = None,
        settings: ClientSettings | None = None,
        connection_factory: ConnectionFactory | None = None,
        service_factory: ServiceFactory | None = None,
    ) -> None:
        """
        Args:
            canister_id: Messaging canister principal; defaults to IC_CANISTER_ID / production canister.
            host: IC endpoint URL; defaults to IC_HOST / https://icp-api.io.
            is_local: Local replica; when true, initialize() fetches the root key first.
            settings: Base settings; explicit arguments above override its fields.
            connection_factory: Builds the connection handle (tests inject fakes).
            service_factory: Builds the callable-service handle from the connection.
        """
        base = settings or ClientSettings()
        self.settings = ClientSettings(
            canister_id=canister_id if canister_id is not None else base.canister_id,
            host=host if host is not None else base.host,
            is_local=is_local if is_local is not None else base.is_local,
            status_timeout_sec=base.status_timeout_sec,
        )
        self._connection_factory = connection_factory or _default_connection
        self._service_factory = service_factory or CanisterMessagingService
        self.connection: CanisterConnection | None = None
        self.service: MessagingService | None = None
        self._is_authorized = False
        self._authorized_project: str | None = None
        self._authorized_key: str | None = None

    @property
    def canister_id(self) -> str:
        return self.settings.canister_id

    @property
    def host(self) -> str:
        return self.settings.host

    @property
    def is_local(self) -> bool:
        return self.settings.is_local

    @property
    def is_initialized(self) -> bool:
        return self.service is not None

    @property
    def is_authorized(self) -> bool:
        return self._is_authorized

    @property
    def authorized_project(self) -> str | None:
        return self._authorized_project

    @property
    def authorized_key(self) -> str | None:
        return self._authorized_key

    async def _delegate(self, failure_event: str, call: Callable[..., Awaitable[Any]], *args: Any) -> Any:
        try:
            return await call(*args)
        except Exception as e:
            logger.exception(failure_event, canister_id=self.canister_id, error=str(e))
            raise

    async def initialize(self) -> bool:
        """Create the connection, bootstrap the root key on a local replica, then the service handle."""
        try:
            self.connection = self._connection_factory(self.settings)
            if self.is_local:
                await self.connection.fetch_root_key()
            self.service = self._service_factory(self.connection, self.canister_id)
        except Exception as e:
            logger.exception(
                "ic_client_initialize_failed",
                canister_id=self.canister_id,
                host=self.host,
                error=str(e),
            )
            raise
        logger.info(
            "ic_client_initialized",
            canister_id=self.canister_id,
            host=self.host,
            is_local=self.is_local,
        )
        return True

    @requires(service_ready)
    async def authorize(self, project: str, key: str) -> bool:
        """Validate (project, key) on the canister and unlock message operations on success."""
        is_valid = await self._delegate("ic_authorize_failed", self.service.validate_key, project, key)
        if is_valid:
            self._is_authorized = True
            self._authorized_project = project
            self._authorized_key = key
            logger.info("ic_authorize_succeeded", project=project)
            return True
        self._is_authorized = False
        self._authorized_project = None
        self._authorized_key = None
        logger.warning("ic_authorize_rejected", project=project)
        return False

    @requires(service_ready, authorized)
    async def send_message(self, sender: str, receiver: str, content: str) -> bool:
        return await self._delegate("ic_send_message_failed", self.service.send_message, sender, receiver, content)

    @requires(service_ready, authorized)
    async def receive_messages(self, user: str) -> list[Message]:
        """Messages addressed to `user`, with timestamps as Python ints."""

        async def fetch() -> list[Message]:
            records = await self.service.receive_messages(user)
            return [Message.from_record(r) for r in records]

        return await self._delegate("ic_receive_messages_failed", fetch)

    @requires(service_ready, authorized)
    async def edit_message(self, address: str, index: int, new_content: str) -> bool:
        return await self._delegate("ic_edit_message_failed", self.service.edit_message, address, index, new_content)

    @requires(service_ready, authorized)
    async def delete_user_messages(self, address: str) -> bool:
        return await self._delegate("ic_delete_user_messages_failed", self.service.delete_user_messages, address)

    @requires(service_ready, authorized)
    async def clear_messages(self) -> bool:
        return await self._delegate("ic_clear_messages_failed", self.service.clear_messages)

    @requires(service_ready, authorized)
    async def harassment_level(self, content: str) -> str:
        return await self._delegate("ic_harassment_level_failed", self.service.harassment_level, content)

    @requires(service_ready, authorized)
    async def suggest_improved_message(self, content: str) -> str:
        return await self._delegate(
            "ic_suggest_improved_message_failed", self.service.suggest_improved_message, content
        )

    @requires(service_ready)
    async def validate_key(self, project: str, key: str) -> bool:
        """Check a project key without touching authorization state."""
        return await self._delegate("ic_validate_key_failed", self.service.validate_key, project, key)

    @requires(connection_ready)
    async def get_canister_status(self) -> dict[str, Any]:
        """Replica status map from the connection, unchanged."""
        return await self._delegate("ic_status_failed", self.connection.status)
