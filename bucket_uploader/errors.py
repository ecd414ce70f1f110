"""Exceptions raised by the bucket uploader."""
from pathlib import Path
from typing import Optional, Union


class BucketError(Exception):
    """Base class for every upload failure."""


class ConfigError(BucketError):
    """Client configuration is missing or malformed."""


class FileAccessError(BucketError):
    """Local file could not be stat'd, opened or read."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        super().__init__(message)


class MissingFileError(FileAccessError):
    """Local file does not exist."""


class ValidationError(BucketError):
    """File violates the size or extension policy."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        super().__init__(message)


class TransportError(BucketError):
    """Request could not be sent or no response arrived."""


class ServerError(BucketError):
    """API answered with a non-200 HTTP status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API returned non-OK status: {status_code} - {body}")


class DecodeError(BucketError):
    """Response body is not a valid JSON envelope."""


class RemoteError(BucketError):
    """API reported an application level error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownStatusError(BucketError):
    """Envelope carries a status other than success or error."""

    def __init__(self, status):
        self.status = status
        super().__init__(f"unknown response status: {status!r}")
