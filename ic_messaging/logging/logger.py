"""
structlog setup for the IC messaging client.

Every event is a snake_case event_type plus keyword context (canister_id,
host, project, error). Project keys passed as context are masked before
rendering. LOG_FORMAT=json (default) renders one JSON object per line;
anything else uses the console renderer.

No ic_messaging imports here: the other modules import this one at load time.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_LEVEL_VALUE = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

SECRET_FIELDS = frozenset({"key", "secret", "authorized_key", "project_key"})
MASK = "***"


def _stamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _normalize_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """event -> event_type; message mirrors it unless the caller set one."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "event_type" in event_dict:
        event_dict.setdefault("message", str(event_dict["event_type"]))
    return event_dict


def _mask_secrets(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for name in SECRET_FIELDS.intersection(event_dict):
        if event_dict[name]:
            event_dict[name] = MASK
    return event_dict


def configure_structlog() -> None:
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if LOG_FORMAT == "json"
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            _stamp,
            _normalize_event,
            _mask_secrets,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Module logger with `logger=<name>` bound:
        logger = get_logger(__name__)
        logger.info("ic_client_initialized", canister_id=cid, host=host)
    """
    return structlog.get_logger(name).bind(logger=name)
