"""
Homework Command Handler

Translates the three slash commands into DeadlineState changes and a reply:
- /set-announcement-channel
- /create-announcement
- /list-homework

Every method returns the reply text; sending it is left to the interface.
"""

import re
import logging
from datetime import date, datetime
from typing import Optional

import discord

from ..formatters.message_formatter import HomeworkMessageFormatter
from ..services.deadline_state import DeadlineState

logger = logging.getLogger(__name__)

TEXT_CHANNEL_TYPES = frozenset({
    discord.ChannelType.text,
    discord.ChannelType.news,
    discord.ChannelType.public_thread,
    discord.ChannelType.private_thread,
    discord.ChannelType.news_thread,
})

DUE_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_due_date(value: str) -> Optional[date]:
    """Strict YYYY-MM-DD parse; None for anything else"""
    if not DUE_DATE_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def supports_text(channel) -> bool:
    return getattr(channel, "type", None) in TEXT_CHANNEL_TYPES


class HomeworkCommandHandler:
    """Handles homework slash commands against a shared DeadlineState"""

    def __init__(self, state: DeadlineState):
        self.state = state

    def set_announcement_channel(self, channel) -> str:
        if not supports_text(channel):
            logger.info(f"Rejected non-text announcement channel {channel.id} ({channel.type})")
            return HomeworkMessageFormatter.CHANNEL_REJECTED

        self.state.announcement_channel_id = channel.id
        logger.info(f"Announcement channel set to {channel.name} ({channel.id})")
        return HomeworkMessageFormatter.channel_set(channel.name)

    def create_announcement(self, title: str, due_date: str) -> str:
        parsed = parse_due_date(due_date)
        if parsed is None:
            logger.info(f"Rejected homework '{title}' with invalid date {due_date!r}")
            return HomeworkMessageFormatter.INVALID_DATE

        self.state.upsert(title, parsed)
        logger.info(f"Homework '{title}' registered for {parsed}")
        return HomeworkMessageFormatter.homework_added(title, due_date)

    def list_homework(self) -> str:
        return HomeworkMessageFormatter.homework_list(self.state.items())
