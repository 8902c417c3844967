"""
Deadline State

In-memory state shared by the command handler and the deadline sweeper:
- Homework deadlines keyed by title, in registration order
- Ledger of "due tomorrow" reminders already sent
- The single announcement channel reference

Nothing here is persisted; the state lives as long as the process.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Dict, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)

ReminderKey = Tuple[str, date]


@dataclass(frozen=True)
class HomeworkItem:
    """A registered homework deadline"""
    title: str
    due_date: date

    @property
    def due_at(self) -> datetime:
        """Local midnight of the due date, the instant reminders compare against"""
        return datetime.combine(self.due_date, time.min)

    @property
    def reminder_key(self) -> ReminderKey:
        return (self.title, self.due_date)


@dataclass
class DeadlineState:
    """Deadline store, reminder ledger and announcement channel for one bot"""
    deadlines: Dict[str, HomeworkItem] = field(default_factory=dict)
    sent_reminders: Set[ReminderKey] = field(default_factory=set)
    announcement_channel_id: Optional[int] = None

    # === Deadline Store ===

    def upsert(self, title: str, due_date: date) -> HomeworkItem:
        """Register or overwrite the deadline for a title (last write wins)"""
        previous = self.deadlines.get(title)
        if previous is not None and previous.due_date != due_date:
            self._forget_reminders(title, keep=due_date)
            logger.info(f"Homework '{title}' moved from {previous.due_date} to {due_date}")

        item = HomeworkItem(title=title, due_date=due_date)
        self.deadlines[title] = item
        return item

    def remove(self, title: str) -> Optional[HomeworkItem]:
        """Retire a deadline together with its ledger entries"""
        item = self.deadlines.pop(title, None)
        self._forget_reminders(title)
        return item

    def items(self) -> List[HomeworkItem]:
        """Snapshot of the pending deadlines in registration order"""
        return list(self.deadlines.values())

    def __len__(self) -> int:
        return len(self.deadlines)

    def __contains__(self, title: str) -> bool:
        return title in self.deadlines

    # === Reminder Ledger ===

    def was_reminded(self, item: HomeworkItem) -> bool:
        return item.reminder_key in self.sent_reminders

    def mark_reminded(self, item: HomeworkItem) -> None:
        self.sent_reminders.add(item.reminder_key)

    def _forget_reminders(self, title: str, keep: Optional[date] = None) -> None:
        stale = {key for key in self.sent_reminders if key[0] == title and key[1] != keep}
        self.sent_reminders -= stale
