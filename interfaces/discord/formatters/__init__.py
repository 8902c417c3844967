"""
Discord Content Formatters

Plain-text replies and reminder notifications.
"""

from .message_formatter import HomeworkMessageFormatter

__all__ = ['HomeworkMessageFormatter']
