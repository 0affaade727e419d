"""
Structured logging for ic_messaging.

JSON logs with timestamp, event_type and call context. Use get_logger() in all
modules; secret-bearing fields are masked before rendering.
"""

from ic_messaging.logging.logger import get_logger

__all__ = ["get_logger"]
