import logging
import os
import sys

from dotenv import load_dotenv


# Paths & Environment
BASE_PATH = os.path.dirname(__file__)
PROJECT_PATH = os.path.dirname(BASE_PATH)

load_dotenv(os.path.join(PROJECT_PATH, ".env"))


# Discord
DISCORD_BOT_TOKEN = os.getenv("DISCORD_BOT_TOKEN") or os.getenv("TOKEN")


# Commands
COMMANDS_CONFIG_PATH = os.getenv("COMMANDS_CONFIG_PATH", "config.yaml")


# Logging
LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(name)s - %(message)s"
LOG_FILE = os.getenv("LOG_FILE", "app.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    filename=LOG_FILE,
    filemode="a",
    format=LOG_FORMAT,
    level=LOG_LEVEL,
)

root_logger = logging.getLogger()

stdout_handler = logging.StreamHandler(sys.stdout)
stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))
root_logger.addHandler(stdout_handler)

logging.getLogger("discord").setLevel(logging.WARNING)

del root_logger
del stdout_handler
