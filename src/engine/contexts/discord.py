from __future__ import annotations

import discord
from pydantic import BaseModel


class DiscordMessageContext(BaseModel):
    guild_id: str | None = None
    channel_id: str
    user_id: str
    content: str

    @classmethod
    def from_message(cls, msg: discord.Message) -> DiscordMessageContext:
        return cls(
            guild_id=str(msg.guild.id) if msg.guild is not None else None,
            channel_id=str(msg.channel.id),
            user_id=str(msg.author.id),
            content=msg.content,
        )
