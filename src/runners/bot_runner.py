import asyncio
import logging
import signal

import discord

from engine.config_store import ConfigStore
from engine.exc import ConfigLoadError
from engine.message_handler import CommandMessageHandler
from engine.reload_listener import ReloadListener
from .base_runner import BaseRunner


class BotRunner(BaseRunner):
    """Runs the reply bot until SIGINT or SIGTERM. SIGHUP reloads the command file."""

    _connect_errors = (
        discord.LoginFailure,
        discord.GatewayNotFound,
        discord.HTTPException,
        OSError,
    )

    def __init__(
        self,
        token: str | None,
        config_path: str,
        client: discord.Client | None = None,
    ):
        super().__init__("Reply Bot")
        self._token = token
        self._store = ConfigStore(config_path)
        self._client = client
        self._client_task: asyncio.Task | None = None
        self._handler: CommandMessageHandler | None = None
        self._reload_listener = ReloadListener(self._store)
        self._shutdown: asyncio.Event | None = None
        self._signals: list[signal.Signals] = []
        self._logger = logging.getLogger(type(self).__name__)

    @property
    def store(self) -> ConfigStore:
        return self._store

    def run(self) -> None:
        asyncio.run(self.serve())

    async def serve(self) -> None:
        if not self._token:
            raise ConfigLoadError("Discord bot token is not set")

        self._store.load()
        self._setup()

        loop = asyncio.get_running_loop()
        self._shutdown = asyncio.Event()
        self._install_signal_handlers(loop)
        self._reload_listener.start()

        self._client_task = asyncio.create_task(self._client.start(self._token))
        shutdown_task = asyncio.create_task(self._shutdown.wait())
        self._logger.info("running; press ctrl-c to exit")

        try:
            await asyncio.wait(
                {self._client_task, shutdown_task},
                return_when=asyncio.FIRST_COMPLETED,
            )

            if self._client_task.done():
                exc = self._client_task.exception()
                if exc is None:
                    self._logger.info("Discord client stopped")
                elif isinstance(exc, self._connect_errors):
                    self._logger.error(
                        f"Error opening connection: {exc}", exc_info=exc
                    )
                else:
                    raise exc
            else:
                self._logger.info("exiting...")
        finally:
            shutdown_task.cancel()
            try:
                await shutdown_task
            except asyncio.CancelledError:
                pass
            self._remove_signal_handlers(loop)
            await self._reload_listener.stop()
            await self._close_client()

    def request_reload(self) -> None:
        self._reload_listener.request()

    def request_shutdown(self) -> None:
        if self._shutdown is not None:
            self._shutdown.set()

    def _setup(self) -> None:
        if self._client is None:
            intents = discord.Intents.default()
            intents.guild_messages = True
            intents.message_content = True
            self._client = discord.Client(intents=intents)

        self._handler = CommandMessageHandler(self._client, self._store)

        @self._client.event
        async def on_ready():
            self._logger.info(f"Logged in as {self._client.user}")

        @self._client.event
        async def on_message(msg: discord.Message):
            await self._handler.handle(msg)

    def _install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        handlers = [
            (signal.SIGINT, self.request_shutdown),
            (signal.SIGTERM, self.request_shutdown),
        ]
        if hasattr(signal, "SIGHUP"):
            handlers.append((signal.SIGHUP, self.request_reload))

        for sig, callback in handlers:
            try:
                loop.add_signal_handler(sig, callback)
            except (NotImplementedError, RuntimeError):
                self._logger.warning(f"Signal handler for {sig.name} not supported")
                continue
            self._signals.append(sig)

    def _remove_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in self._signals:
            loop.remove_signal_handler(sig)
        self._signals.clear()

    async def _close_client(self) -> None:
        try:
            await self._client.close()
        except Exception:
            self._logger.error("Error closing Discord client", exc_info=True)

        if self._client_task is not None and not self._client_task.done():
            self._client_task.cancel()
            try:
                await self._client_task
            except asyncio.CancelledError:
                pass
        self._client_task = None
