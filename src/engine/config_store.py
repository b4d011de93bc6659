import logging

from engine.configs.bot import BotConfig
from engine.exc import ConfigLoadError


class ConfigStore:
    """Publishes the current command config.

    The published `BotConfig` is immutable and replaced by a single reference
    swap, so a caller holding `current` always sees one consistent config even
    while a reload is running.
    """

    def __init__(self, path: str):
        self._path = path
        self._config = BotConfig()
        self._loaded = False
        self._logger = logging.getLogger(type(self).__name__)

    @property
    def path(self) -> str:
        return self._path

    @property
    def current(self) -> BotConfig:
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> BotConfig | None:
        """Reads and publishes the config file.

        Raises:
            ConfigLoadError: The file couldn't be read or validated and no
                config has been loaded yet.

        Returns:
            BotConfig | None: The newly published config, or None if a reload
                failed and the previous config was kept.
        """
        try:
            config = self._read()
        except ConfigLoadError as e:
            if not self._loaded:
                raise
            self._logger.error(
                f"Failed to reload config from {self._path}, keeping previous config: {e}"
            )
            return None

        self._config = config
        self._loaded = True
        self._logger.info(
            f"config loaded successfully (commands={len(config.commands)}, "
            f"approved_only={config.approved_only}, ids={len(config.ids)})"
        )
        return config

    def _read(self) -> BotConfig:
        try:
            with open(self._path, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigLoadError(f"Failed to read {self._path}: {e}", self._path) from e

        return BotConfig.from_yaml(text, self._path)
