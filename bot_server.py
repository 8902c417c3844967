import asyncio
import logging
import sys

import discord
import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from interfaces.discord.core_discord_orchestration import create_discord_app
from runtime.config import BotConfig, ConfigError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Keep-alive app polled by uptime monitors
app = FastAPI(
    title="Homework Bot - Keep-Alive Server",
    description="Liveness endpoint for the homework deadline bot",
    version="1.0.0",
)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Static liveness response"""
    return "Bot is running!"


def create_keepalive_server(port: int) -> uvicorn.Server:
    """Build a uvicorn server for the keep-alive app that shares the bot's event loop"""
    config = uvicorn.Config(app, host="0.0.0.0", port=port, log_level="warning")
    return uvicorn.Server(config)


async def run(config: BotConfig) -> None:
    keepalive = create_keepalive_server(config.port)
    keepalive_task = asyncio.create_task(keepalive.serve())
    logger.info(f"Keep-alive server running on port {config.port}")

    discord_interface = create_discord_app()
    try:
        await discord_interface.start(config.discord_token)
    finally:
        await discord_interface.close()
        keepalive.should_exit = True
        await keepalive_task


def main() -> int:
    try:
        config = BotConfig.from_env()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        asyncio.run(run(config))
    except discord.LoginFailure as e:
        # Nothing works without a session
        logger.error(f"Discord login failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Homework bot stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
