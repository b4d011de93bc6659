import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from engine.exc import ConfigLoadError


class BotConfig(BaseModel):
    """Command file contents.

    Args:
        commands: Exact message text mapped to the reply text.
        approved_only: When set, only users listed in `ids` may trigger commands.
        ids: Approved user ids, kept in file order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    commands: dict[str, str] = {}
    approved_only: bool = False
    ids: list[str] = []

    @classmethod
    def from_yaml(cls, text: str, path: str | None = None) -> "BotConfig":
        # BaseLoader keeps every scalar as its source text, so `on`, `~` and
        # unquoted snowflakes stay strings. pydantic parses `approved_only`.
        try:
            data = yaml.load(text, Loader=yaml.BaseLoader)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Invalid YAML: {e}", path) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"Expected a mapping at the top level, got {type(data).__name__}",
                path,
            )

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid config: {e}", path) from e

    def is_approved(self, user_id: str) -> bool:
        if not self.approved_only:
            return True

        for approved_id in self.ids:
            if approved_id == user_id:
                return True
        return False

    def lookup(self, content: str) -> str | None:
        return self.commands.get(content)
