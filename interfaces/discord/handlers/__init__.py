"""
Discord Command Handlers

Turns validated slash command invocations into state changes and replies.
"""

from .command_handler import HomeworkCommandHandler, parse_due_date

__all__ = ['HomeworkCommandHandler', 'parse_due_date']
