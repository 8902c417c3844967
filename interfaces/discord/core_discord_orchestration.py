import logging

import discord
from discord import app_commands

from .formatters.message_formatter import HomeworkMessageFormatter
from .handlers.command_handler import HomeworkCommandHandler
from .services.deadline_sweeper import DeadlineSweeper, SWEEP_INTERVAL_SECONDS

logger = logging.getLogger(__name__)

ACTIVITY_NAME = "Announcing Homework :mega:"


class DiscordInterface:
    """
    Homework bot on Discord - slash commands in, replies and reminders out
    """

    def __init__(self, sweep_interval: float = SWEEP_INTERVAL_SECONDS):
        # Slash commands and channel lookups only need the guilds intent
        self.client = discord.Client(
            intents=discord.Intents(guilds=True),
            activity=discord.Game(name=ACTIVITY_NAME),
        )
        self.tree = app_commands.CommandTree(self.client)

        # The sweeper owns the deadline state; the handler works on the same object
        self.sweeper = DeadlineSweeper(self.client, interval=sweep_interval)
        self.command_handler = HomeworkCommandHandler(self.sweeper.state)

        self._commands_synced = False

        self._setup_handlers()

    @property
    def state(self):
        return self.sweeper.state

    def _setup_handlers(self):
        """Setup client events and slash commands"""

        @self.client.event
        async def on_ready():
            await self._on_ready()

        @self.tree.command(name="set-announcement-channel", description="Set the announcement channel")
        @app_commands.describe(channel="The channel to set for announcements")
        async def set_announcement_channel(interaction: discord.Interaction, channel: discord.abc.GuildChannel):
            await self.handle_set_announcement_channel(interaction, channel)

        @self.tree.command(name="create-announcement", description="Create a new homework announcement")
        @app_commands.describe(
            title="The name of the homework",
            due_date="The due date in YYYY-MM-DD format",
        )
        async def create_announcement(interaction: discord.Interaction, title: str, due_date: str):
            await self.handle_create_announcement(interaction, title, due_date)

        @self.tree.command(name="list-homework", description="List all upcoming homework")
        async def list_homework(interaction: discord.Interaction):
            await self.handle_list_homework(interaction)

    async def _on_ready(self):
        logger.info(f"Logged in as {self.client.user}")

        # on_ready fires again after every reconnect; register commands only once
        if not self._commands_synced:
            await self.register_commands()

        self.sweeper.start()

    async def register_commands(self) -> bool:
        """Register the slash commands globally; failures are logged, not raised"""
        try:
            logger.info("Started refreshing global application (/) commands.")
            synced = await self.tree.sync()
            self._commands_synced = True
            logger.info(f"Successfully reloaded {len(synced)} global application (/) commands.")
            return True
        except discord.DiscordException as e:
            logger.error(f"Error registering global commands: {e}")
            return False

    # === Command Entry Points ===

    async def _reply(self, interaction: discord.Interaction, reply: str) -> None:
        """Answer the interaction, spilling long replies into follow-up messages"""
        first, *rest = HomeworkMessageFormatter.split_message(reply)
        await interaction.response.send_message(first)
        for chunk in rest:
            await interaction.followup.send(chunk)

    async def handle_set_announcement_channel(self, interaction: discord.Interaction, channel) -> None:
        reply = self.command_handler.set_announcement_channel(channel)
        await self._reply(interaction, reply)

    async def handle_create_announcement(self, interaction: discord.Interaction, title: str, due_date: str) -> None:
        reply = self.command_handler.create_announcement(title, due_date)
        await self._reply(interaction, reply)

    async def handle_list_homework(self, interaction: discord.Interaction) -> None:
        reply = self.command_handler.list_homework()
        await self._reply(interaction, reply)

    # === Lifecycle ===

    async def start(self, token: str) -> None:
        """Log in and run until the connection is closed; LoginFailure propagates"""
        async with self.client:
            await self.client.start(token)

    async def close(self) -> None:
        await self.sweeper.stop()
        if not self.client.is_closed():
            await self.client.close()


def create_discord_app(sweep_interval: float = SWEEP_INTERVAL_SECONDS) -> DiscordInterface:
    """Create the Discord interface with its commands and sweeper wired up"""
    return DiscordInterface(sweep_interval=sweep_interval)
