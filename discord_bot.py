import logging

import discord
from release_radar import DatasetLoader, ReleaseRadar
from release_radar.commands import handle_command
from release_radar.config import load_settings

# Load settings from the environment and the .env file.
# The .env file must hold the token as DISCORD_TOKEN="YOUR_BOT_TOKEN".
settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("discord_bot")

TOKEN = settings.discord_token

if not TOKEN:
    raise ValueError("DISCORD_TOKEN environment variable is not set. Check your .env file.")

# Intents required by the client.
intents = discord.Intents.default()
intents.message_content = True  # needed to read command text

client = discord.Client(intents=intents)

radar = ReleaseRadar(DatasetLoader(settings.data_dir), default_limit=settings.default_limit)


@client.event
async def on_ready():
    """Called once the bot has logged in."""
    logger.info("Logged in as %s (data dir: %s)", client.user, settings.data_dir)


@client.event
async def on_message(message):
    """Called for every message the bot can see."""
    # Ignore the bot's own messages.
    if message.author == client.user:
        return

    try:
        response = handle_command(message.content, radar)
    except Exception:
        logger.exception("Error while handling %r", message.content)
        await message.channel.send("Something went wrong while fetching releases.")
        return

    if response is None:
        return
    await message.channel.send(response)


if __name__ == "__main__":
    client.run(TOKEN, log_handler=None)
