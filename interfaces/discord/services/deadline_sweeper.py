"""
Deadline Sweeper

Periodic background task that turns registered deadlines into reminders:
- "due tomorrow" once per item and due date, while the item stays pending
- "due now" when the deadline is reached, after which the item is retired

The sweeper owns the DeadlineState; the command handler receives it by
reference.
"""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional

import discord

from ..formatters.message_formatter import HomeworkMessageFormatter
from .deadline_state import DeadlineState

logger = logging.getLogger(__name__)

SWEEP_INTERVAL_SECONDS = 60
REMINDER_WINDOW = timedelta(hours=24)


class DeadlineSweeper:
    """Scan deadlines on a fixed period and post reminders to the announcement channel"""

    def __init__(
        self,
        client: discord.Client,
        state: Optional[DeadlineState] = None,
        interval: float = SWEEP_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.client = client
        self.state = state or DeadlineState()
        self.interval = interval
        self.clock = clock
        self._task: Optional[asyncio.Task] = None

    # === Lifecycle ===

    def start(self) -> None:
        """Start the periodic sweep if not already started"""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._sweep_periodically())
            logger.info(f"Deadline sweeper started (every {self.interval}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Deadline sweeper stopped")

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _sweep_periodically(self):
        while True:
            try:
                await self.sweep_once()
            except Exception:
                logger.exception("Deadline sweep failed")
            await asyncio.sleep(self.interval)

    # === Sweep ===

    async def sweep_once(self) -> List[str]:
        """Run one tick; returns the notifications that were attempted"""
        channel = self._resolve_channel()
        if channel is None:
            return []

        # Decide and mutate before the first await so a tick never interleaves with commands
        notifications = self.plan(self.clock())

        for text in notifications:
            try:
                await channel.send(text, allowed_mentions=discord.AllowedMentions(everyone=True))
                logger.info(f"Reminder sent to channel {channel.id}: {text}")
            except Exception as e:
                # Each notice is independent; one failed send must not drop the rest
                logger.error(f"Failed to send reminder to channel {channel.id}: {e}")

        return notifications

    def plan(self, now: datetime) -> List[str]:
        """Apply one tick's decisions to the state and return the texts to post"""
        notifications = []
        tomorrow = now + REMINDER_WINDOW

        for item in self.state.items():
            due_at = item.due_at

            if due_at <= now:
                notifications.append(HomeworkMessageFormatter.due_now(item.title))
                self.state.remove(item.title)
                continue

            if due_at <= tomorrow and not self.state.was_reminded(item):
                notifications.append(HomeworkMessageFormatter.due_tomorrow(item.title))
                self.state.mark_reminded(item)

        return notifications

    def _resolve_channel(self) -> Optional[discord.abc.Messageable]:
        channel_id = self.state.announcement_channel_id
        if channel_id is None:
            logger.debug("No announcement channel set, skipping sweep")
            return None

        channel = self.client.get_channel(channel_id)
        if not isinstance(channel, discord.abc.Messageable):
            logger.debug(f"Announcement channel {channel_id} unavailable, skipping sweep")
            return None
        return channel
