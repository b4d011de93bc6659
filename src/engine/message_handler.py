import logging

import discord

from engine.config_store import ConfigStore
from engine.contexts.discord import DiscordMessageContext


class CommandMessageHandler:
    """Replies to messages whose text exactly matches a configured command."""

    def __init__(self, client: discord.Client, store: ConfigStore) -> None:
        self._client = client
        self._store = store
        self._logger = logging.getLogger(type(self).__name__)

    async def handle(self, msg: discord.Message) -> str | None:
        """Dispatches a single inbound message.

        Args:
            msg (discord.Message): The message received from the gateway.

        Returns:
            str | None: The reply sent to the channel, if any.
        """
        if self._client.user is not None and msg.author.id == self._client.user.id:
            return None

        ctx = DiscordMessageContext.from_message(msg)
        config = self._store.current

        reply = config.lookup(ctx.content)
        if reply is None or not config.is_approved(ctx.user_id):
            return None

        try:
            await msg.channel.send(reply)
        except discord.HTTPException:
            self._logger.error(
                f"Failed to send reply in channel id={ctx.channel_id} for user id={ctx.user_id}",
                exc_info=True,
            )
            return None

        return reply
