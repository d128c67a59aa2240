class GameShelfError(Exception):
    pass

class ConfigurationError(GameShelfError):
    """Library configuration is missing, unreadable or has the wrong shape. Fatal."""

class MalformedRecordError(GameShelfError):
    """A single app manifest could not be used. The scan skips it."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

class WriteError(GameShelfError):
    """A launcher file could not be written. Reported per item."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
