"""
Discord Bot Services

Core services for the homework bot:
- In-memory deadline state
- Periodic deadline sweeping and reminder delivery
"""

from .deadline_state import DeadlineState, HomeworkItem
from .deadline_sweeper import DeadlineSweeper

__all__ = ['DeadlineState', 'HomeworkItem', 'DeadlineSweeper']
