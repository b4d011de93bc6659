from abc import ABC, abstractmethod


class BaseRunner(ABC):
    def __init__(self, name: str | None = None):
        self.name = name or type(self).__name__

    @abstractmethod
    def run(self) -> None: ...
