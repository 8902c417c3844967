"""
Homework Message Formatter

Builds every user-facing text the bot produces:
- Command replies (channel setup, homework registration, listing)
- Reminder notifications posted to the announcement channel
"""

from datetime import date
from typing import Iterable, List

DISCORD_MAX_MESSAGE_LEN = 2000


class HomeworkMessageFormatter:
    """Render command replies and reminder notifications as plain text"""

    CHANNEL_REJECTED = "Please specify a text-based channel."
    INVALID_DATE = "Invalid date format. Use YYYY-MM-DD."
    NO_DEADLINES = "No homework deadlines set."
    LIST_HEADER = "Upcoming Homework Deadlines:"

    @staticmethod
    def channel_set(channel_name: str) -> str:
        return f"Announcement channel set to {channel_name}"

    @staticmethod
    def homework_added(title: str, due_date_text: str) -> str:
        """Confirm a registration, echoing the date exactly as the user typed it"""
        return f'Homework "{title}" has been added with a deadline of {due_date_text}.'

    @staticmethod
    def format_date(value: date) -> str:
        # strftime("%Y") drops the zero padding of short years on some platforms
        return value.isoformat()

    @staticmethod
    def homework_list(items: Iterable) -> str:
        """Render the pending homework, one line per item in store order"""
        lines = [
            f"- {item.title}: {HomeworkMessageFormatter.format_date(item.due_date)}"
            for item in items
        ]
        if not lines:
            return HomeworkMessageFormatter.NO_DEADLINES
        return "\n".join([HomeworkMessageFormatter.LIST_HEADER] + lines)

    @staticmethod
    def due_tomorrow(title: str) -> str:
        return f'⏰ Reminder: Homework "{title}" is due tomorrow! @everyone'

    @staticmethod
    def due_now(title: str) -> str:
        return f'⏰ Reminder: Homework "{title}" is due now! @everyone'

    @staticmethod
    def split_message(text: str, limit: int = DISCORD_MAX_MESSAGE_LEN) -> List[str]:
        """Split a reply into chunks within Discord's length limit, preferring line breaks"""
        chunks = []
        remaining = text
        while len(remaining) > limit:
            split_at = remaining.rfind("\n", 0, limit + 1)
            if split_at <= 0:
                split_at = limit
            chunks.append(remaining[:split_at])
            remaining = remaining[split_at:].lstrip("\n")
        if remaining or not chunks:
            chunks.append(remaining)
        return chunks
