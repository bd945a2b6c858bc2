from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)


class LoggingNotifier:
    # Notification sink for headless runs: messages go to the log
    async def show_information_message(self, message: str) -> None:
        logger.info(message)


class CollectingNotifier:
    # Keeps messages so a tool can hand them back to its caller
    def __init__(self) -> None:
        self.messages: List[str] = []

    async def show_information_message(self, message: str) -> None:
        logger.info(message)
        self.messages.append(message)
