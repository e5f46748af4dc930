"""Telegram notification integration."""

from .telegram_client import TelegramClient, format_summary

__all__ = ["TelegramClient", "format_summary"]
