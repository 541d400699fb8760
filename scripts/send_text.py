#!/usr/bin/env python3
"""
Posts a text message to the configured Rocket.Chat webhook.
Reads ROCKETCHAT_WEBHOOK_URL and ROCKETCHAT_CHANNEL from the environment or .env.

    python scripts/send_text.py "Hello from the webhook client"
"""
import sys
import logging
from dotenv import load_dotenv

from rocketchat_hooks.client import RocketChat
from rocketchat_hooks.errors import RocketChatError
from rocketchat_hooks.log import setup_logging

load_dotenv()
setup_logging()
logger = logging.getLogger(__name__)


def main():
    text = " ".join(sys.argv[1:]) or "Hello from rocketchat-hooks"
    client = RocketChat.from_settings()

    logger.info(f"Sending to {client.channel}...")
    try:
        response = client.send_text_sync(text)
    except RocketChatError as e:
        logger.error(f"Send failed: {e}")
        sys.exit(1)

    print(f"Delivered: HTTP {response.status_code}")


if __name__ == "__main__":
    main()
