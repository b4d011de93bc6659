"""Root test configuration.

Keeps the log file out of the working tree and provides factories for the
discord objects the bot touches, so no test needs a gateway connection.
"""

import os

os.environ.setdefault("LOG_FILE", os.devnull)

from unittest.mock import AsyncMock, MagicMock

import pytest

BOT_USER_ID = 999


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a command file and return its path."""
    path = tmp_path / "config.yaml"

    def _write(text: str) -> str:
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def client() -> MagicMock:
    c = MagicMock()
    c.user.id = BOT_USER_ID
    c.start = AsyncMock()
    c.close = AsyncMock()
    return c


@pytest.fixture
def make_message():
    def _make(content: str, author_id: int = 1, channel_id: int = 10, guild_id: int | None = 100):
        msg = MagicMock()
        msg.content = content
        msg.author.id = author_id
        msg.channel.id = channel_id
        msg.channel.send = AsyncMock()
        if guild_id is None:
            msg.guild = None
        else:
            msg.guild.id = guild_id
        return msg

    return _make
