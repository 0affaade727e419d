"""
Data models for canister replies.

Message mirrors the canister's Message record; the only conversion applied is
the Candid int timestamp to a Python int.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ic_messaging.idl import idl_hash


def _field(record: dict[str, Any], name: str) -> Any:
    """
    Read a record field by label. ic-py yields either the label itself or the
    Candid hash form ("_<hash>") depending on whether return types were known.
    """
    if name in record:
        return record[name]
    hashed = f"_{idl_hash(name)}"
    if hashed in record:
        return record[hashed]
    raise KeyError(name)


@dataclass(frozen=True)
class Message:
    """One message as stored by the canister."""

    sender: str
    receiver: str
    content: str
    timestamp: int  # canister time, nanoseconds since epoch

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Message":
        """Build from a decoded receiveMessages record."""
        return cls(
            sender=_field(record, "sender"),
            receiver=_field(record, "receiver"),
            content=_field(record, "content"),
            timestamp=int(_field(record, "timestamp")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
