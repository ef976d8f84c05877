"""
Error taxonomy shared by use cases, adapters and the HTTP layer.

Part of ALT-7: Error handling for storage and catalog failures
"""

from typing import Optional


class TrackerError(Exception):
    """Base exception for tracker errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(TrackerError):
    """Raised when the exercise catalog is unreachable or answers non-2xx."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StorageError(TrackerError):
    """Raised when the key-value persistence fails to read or write."""

    pass


class ParseError(TrackerError):
    """Raised when a stored blob or a catalog payload is malformed."""

    pass
