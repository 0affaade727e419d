"""
Environment variable loading for the IC messaging client.

- IC_CANISTER_ID: messaging canister principal (default: production canister)
- IC_HOST: IC boundary node / replica URL (default: https://icp-api.io)
- IC_LOCAL: 1 | true | yes | on when talking to a local replica (fetches root key)
- IC_STATUS_TIMEOUT_SEC: HTTP timeout for the replica status endpoint
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is ic_messaging/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_CANISTER_ID = "usxsn-hyaaa-aaaad-aapxq-cai"
DEFAULT_IC_HOST = "https://icp-api.io"
LOCAL_REPLICA_HOST = "http://127.0.0.1:4943"
DEFAULT_STATUS_TIMEOUT_SEC = 30.0

_TRUTHY = ("1", "true", "yes", "on")


def load_ic_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH)


def get_canister_id() -> str:
    """Return IC_CANISTER_ID from env, or the production messaging canister."""
    load_ic_env()
    cid = (os.getenv("IC_CANISTER_ID") or "").strip()
    return cid or DEFAULT_CANISTER_ID


def is_local_replica() -> bool:
    """Return True if IC_LOCAL marks a local replica."""
    load_ic_env()
    return (os.getenv("IC_LOCAL") or "").strip().lower() in _TRUTHY


def get_ic_host() -> str:
    """
    Resolve the IC host URL.
    Order: IC_HOST > local replica default (IC_LOCAL set) > public boundary node.
    """
    load_ic_env()
    host = (os.getenv("IC_HOST") or "").strip()
    if host:
        return host
    return LOCAL_REPLICA_HOST if is_local_replica() else DEFAULT_IC_HOST


def get_status_timeout_sec() -> float:
    """Return IC_STATUS_TIMEOUT_SEC; non-numeric or non-positive values fall back to the default."""
    load_ic_env()
    raw = (os.getenv("IC_STATUS_TIMEOUT_SEC") or "").strip()
    if not raw:
        return DEFAULT_STATUS_TIMEOUT_SEC
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_STATUS_TIMEOUT_SEC
    return value if value > 0 else DEFAULT_STATUS_TIMEOUT_SEC
