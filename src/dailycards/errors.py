"""Exceptions raised by the storage layer."""


class StorageError(Exception):
    """Raised when a catalog or progress backend cannot be read or written."""

    def __init__(self, message: str, location: str = ""):
        super().__init__(f"{message}: {location}" if location else message)
        self.location = location
