from .bot import bot

__all__ = ["bot"]
