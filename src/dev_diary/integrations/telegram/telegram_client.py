"""Telegram notifier for diary summaries."""

import logging

from telegram import Bot
from telegram.constants import ParseMode
from telegram.error import TelegramError

from dev_diary.models.diary import DiaryLink

logger = logging.getLogger(__name__)


def format_summary(title: str, summary: str, links: list[DiaryLink]) -> str:
    """Build the Markdown message announcing a diary."""
    lines = [f"*{title}*", "", summary]
    if links:
        lines.extend(["", "*Links:*"])
        lines.extend(f"[{link.title}]({link.url})" for link in links)
    return "\n".join(lines)


class TelegramClient:
    """Client for sending notifications through the Telegram Bot API."""

    def __init__(self, token: str, chat_id: str, bot: Bot | None = None):
        """Initialize the Telegram client.

        Args:
            token: Bot token.
            chat_id: Chat that receives notifications.
            bot: Pre-built bot instance, mainly for tests.

        Raises:
            ValueError: If the token or chat id is empty.
        """
        if not token:
            raise ValueError("Telegram bot token cannot be empty")
        if not chat_id:
            raise ValueError("Telegram chat id cannot be empty")

        self.chat_id = chat_id
        self.bot = bot or Bot(token=token)

    async def send_message(self, text: str, parse_mode: str = ParseMode.MARKDOWN) -> bool:
        """Send a text message to the configured chat.

        Returns:
            bool: True if the message was sent, False if Telegram refused it.
        """
        try:
            await self.bot.send_message(
                chat_id=self.chat_id, text=text, parse_mode=parse_mode
            )
            logger.info(f"Message sent to chat {self.chat_id}")
            return True
        except TelegramError as e:
            logger.error(f"Failed to send message to {self.chat_id}: {e}")
            return False

    async def send_summary(
        self, title: str, summary: str, links: list[DiaryLink]
    ) -> bool:
        """Send a diary summary with links to where it was published."""
        return await self.send_message(format_summary(title, summary, links))
