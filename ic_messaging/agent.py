"""
Connection handle to an IC replica / boundary node.

Responsibilities:
- Build the ic-py Client and anonymous Agent used for canister calls.
- Query the replica status endpoint (CBOR over HTTP) for health and root key.
- Fetch and hold the root key when talking to a local replica.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import cbor2
import httpx

from ic_messaging.config.env import DEFAULT_STATUS_TIMEOUT_SEC
from ic_messaging.core.exceptions import RootKeyUnavailableError
from ic_messaging.logging import get_logger

logger = get_logger(__name__)

STATUS_PATH = "/api/v2/status"
# CBOR self-describe tag the replica wraps every reply in
SELF_DESCRIBE_TAG = 55799


def decode_status(body: bytes) -> dict[str, Any]:
    """
    Decode a CBOR status body into a plain dict.
    Newer cbor2 strips the self-describe tag itself and yields a frozendict.
    """
    decoded = cbor2.loads(body)
    if isinstance(decoded, cbor2.CBORTag) and decoded.tag == SELF_DESCRIBE_TAG:
        decoded = decoded.value
    if not isinstance(decoded, Mapping):
        raise ValueError(f"Unexpected status payload type: {type(decoded).__name__}")
    return dict(decoded)


class CanisterConnection:
    """
    Live channel to an IC endpoint.

    The ic-py agent is created on first use so that status queries and the
    root-key bootstrap do not depend on it.
    """

    def __init__(
        self,
        host: str,
        *,
        timeout_sec: float = DEFAULT_STATUS_TIMEOUT_SEC,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not host.strip():
            raise ValueError("host must be non-empty")
        self.host = host.strip().rstrip("/")
        self.root_key: bytes | None = None
        self._timeout = timeout_sec
        self._transport = transport
        self._agent: Any = None

    @property
    def agent(self) -> Any:
        if self._agent is None:
            from ic.agent import Agent
            from ic.client import Client
            from ic.constants import IC_ROOT_KEY
            from ic.identity import Identity

            self._agent = Agent(
                Identity(anonymous=True),
                Client(url=self.host),
                root_key=self.root_key or IC_ROOT_KEY,
            )
        return self._agent

    async def status(self) -> dict[str, Any]:
        """GET the replica status endpoint and return the decoded CBOR map."""
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as http:
            resp = await http.get(f"{self.host}{STATUS_PATH}")
        resp.raise_for_status()
        return decode_status(resp.content)

    async def fetch_root_key(self) -> bytes:
        """Fetch the replica's root key and keep it on this connection. Local replicas only."""
        status = await self.status()
        root_key = status.get("root_key")
        if not root_key:
            raise RootKeyUnavailableError()
        self.root_key = bytes(root_key)
        if self._agent is not None:
            self._agent.root_key = self.root_key
        logger.info("ic_root_key_fetched", host=self.host, root_key_len=len(self.root_key))
        return self.root_key
