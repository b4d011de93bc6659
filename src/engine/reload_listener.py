import asyncio
import logging

from engine.config_store import ConfigStore
from engine.exc import ConfigLoadError


class ReloadListener:
    """Reloads the config store in the background whenever a reload is requested.

    Requests made while a reload is running collapse into a single follow-up
    reload. Reloads run one at a time on a worker thread.
    """

    def __init__(self, store: ConfigStore):
        self._store = store
        self._requested: asyncio.Event | None = None
        self._task: asyncio.Task | None = None
        self._logger = logging.getLogger(type(self).__name__)

    @property
    def alive(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        self._requested = asyncio.Event()
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None

    def request(self) -> None:
        """Schedules a reload. Must be called from the event loop thread."""
        if self._requested is None:
            raise RuntimeError("ReloadListener hasn't been started")
        self._logger.info("Config reload requested")
        self._requested.set()

    async def _run(self) -> None:
        while True:
            await self._requested.wait()
            self._requested.clear()
            try:
                await asyncio.to_thread(self._store.load)
            except ConfigLoadError as e:
                self._logger.error(f"Config reload failed: {e}")
            except Exception:
                self._logger.error("Unexpected error reloading config", exc_info=True)
