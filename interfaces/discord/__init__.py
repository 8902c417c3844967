"""
Discord Integration Module

Homework deadline bot for Discord with support for:
- Slash commands for channel setup, homework registration and listing
- Periodic "due tomorrow" and "due now" reminders
"""

from .core_discord_orchestration import DiscordInterface, create_discord_app

__all__ = ['DiscordInterface', 'create_discord_app']
