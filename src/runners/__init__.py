from .base_runner import BaseRunner
from .bot_runner import BotRunner

__all__ = [
    "BaseRunner",
    "BotRunner",
]
