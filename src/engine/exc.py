class ConfigLoadError(Exception):
    def __init__(self, msg: str, path: str | None = None):
        super().__init__(msg)
        self.path = path
