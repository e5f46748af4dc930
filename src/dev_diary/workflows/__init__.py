"""Temporal workflows for Dev Diary."""

from .daily_diary import DailyDiary

__all__ = ["DailyDiary"]
