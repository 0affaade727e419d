"""
Client settings resolved from the environment.

Explicit constructor arguments on IcMessagingClient take precedence; anything
left as None falls back to these values.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ic_messaging.config.env import (
    get_canister_id,
    get_ic_host,
    get_status_timeout_sec,
    is_local_replica,
)


@dataclass
class ClientSettings:
    """Connection settings for one client instance (env or explicit)."""

    canister_id: str = field(default_factory=get_canister_id)
    host: str = field(default_factory=get_ic_host)
    is_local: bool = field(default_factory=is_local_replica)
    status_timeout_sec: float = field(default_factory=get_status_timeout_sec)

    def __post_init__(self) -> None:
        self.canister_id = self.canister_id.strip()
        self.host = self.host.strip().rstrip("/")
        if not self.canister_id:
            raise ValueError("canister_id must be non-empty")
        if not self.host:
            raise ValueError("host must be non-empty")


def get_settings() -> ClientSettings:
    """Return settings built from the current environment."""
    return ClientSettings()
