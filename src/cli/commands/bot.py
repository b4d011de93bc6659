import logging
import sys

import click

from config import COMMANDS_CONFIG_PATH, DISCORD_BOT_TOKEN
from engine.config_store import ConfigStore
from engine.exc import ConfigLoadError
from runners import BotRunner


logger = logging.getLogger("cli")


@click.group()
def bot():
    return


@bot.command(name="run")
@click.option(
    "--config",
    "config_path",
    default=COMMANDS_CONFIG_PATH,
    show_default=True,
    help="Path to the YAML command file.",
)
def bot_run(config_path: str):
    runner = BotRunner(token=DISCORD_BOT_TOKEN, config_path=config_path)

    try:
        runner.run()
    except ConfigLoadError as e:
        logger.critical(f"Failed to start bot: {e}")
        sys.exit(1)


@bot.command(name="check")
@click.option(
    "--config",
    "config_path",
    default=COMMANDS_CONFIG_PATH,
    show_default=True,
    help="Path to the YAML command file.",
)
def bot_check(config_path: str):
    """Validates a command file without connecting to Discord."""
    store = ConfigStore(config_path)

    try:
        config = store.load()
    except ConfigLoadError as e:
        click.echo(f"{config_path}: {e}", err=True)
        sys.exit(1)

    click.echo(f"{len(config.commands)} command(s) loaded from {config_path}")
    if config.approved_only:
        click.echo(f"Allow-list enforced for {len(config.ids)} user id(s)")
    else:
        click.echo("Allow-list disabled, all users may run commands")
