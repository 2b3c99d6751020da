from typing import Iterable, Optional


class ConfigurationError(Exception):
    """Raised when an agent definition is incomplete or invalid at assembly time."""

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.fields = tuple(fields or ())
