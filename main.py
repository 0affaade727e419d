"""
Example entrypoint: initialize, authorize, send and read messages on the canister.

Env: IC_PROJECT, IC_PROJECT_KEY (required); IC_SENDER, IC_RECEIVER (optional, send + read);
IC_CANISTER_ID, IC_HOST, IC_LOCAL (see ic_messaging.config.env).

Run: python main.py
"""

import asyncio
import os
import sys

# Configure structured JSON logging before other imports that may log
from ic_messaging.logging import get_logger

logger = get_logger("main")


async def run() -> int:
    """Walk through the client lifecycle once; return a process exit code."""
    from ic_messaging import IcMessagingClient
    from ic_messaging.config.env import load_ic_env

    load_ic_env()
    project = os.getenv("IC_PROJECT", "").strip()
    key = os.getenv("IC_PROJECT_KEY", "").strip()
    if not project or not key:
        logger.error("main_config_error", message="Set IC_PROJECT and IC_PROJECT_KEY")
        return 1

    client = IcMessagingClient()
    await client.initialize()

    if not await client.authorize(project, key):
        logger.error("main_authorization_failed", project=project)
        return 1

    sender = os.getenv("IC_SENDER", "").strip()
    receiver = os.getenv("IC_RECEIVER", "").strip()
    if sender and receiver:
        sent = await client.send_message(sender, receiver, "Hello, how are you?")
        logger.info("main_message_sent", sent=sent, receiver=receiver)

        messages = await client.receive_messages(receiver)
        logger.info(
            "main_messages_received",
            receiver=receiver,
            message_count=len(messages),
            messages=[m.to_dict() for m in messages],
        )

    level = await client.harassment_level("This is a test message")
    logger.info("main_harassment_level", level=level)

    improved = await client.suggest_improved_message("This is a rude message")
    logger.info("main_suggested_message", suggestion=improved)
    return 0


def main() -> None:
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
