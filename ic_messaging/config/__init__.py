"""
Configuration management for the IC messaging client.

Loads settings from environment variables and an optional .env file.
"""

from ic_messaging.config.settings import ClientSettings, get_settings  # noqa: F401

__all__ = ["ClientSettings", "get_settings"]
