"""
Models for bucket_uploader.

Immutable dataclasses for client configuration and API responses.
"""
import json
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Union

from .constants import (
    ALLOWED_EXTENSIONS,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    MAX_FILE_SIZE,
    UPLOAD_ENDPOINT,
)
from .errors import ConfigError, DecodeError, UnknownStatusError


class UploadStatus(Enum):
    """Envelope status reported by the API."""
    SUCCESS = "success"
    ERROR = "error"


def _text_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"metadata '{key}' is not a string: {value!r}")
    return value


@dataclass(frozen=True)
class FileMetadata:
    """File details echoed back by the API."""
    original_name: str
    file_type: str
    file_size: int
    upload_time: str  # server formatted, kept verbatim

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileMetadata":
        """Missing or null fields fall back to empty values; wrong types raise DecodeError."""
        file_size = data.get("file_size")
        if file_size is None:
            file_size = 0
        elif isinstance(file_size, bool) or not isinstance(file_size, int):
            raise DecodeError(f"invalid file_size in metadata: {file_size!r}")
        return cls(
            original_name=_text_field(data, "original_name"),
            file_type=_text_field(data, "file_type"),
            file_size=file_size,
            upload_time=_text_field(data, "upload_time"),
        )


@dataclass(frozen=True)
class UploadResult:
    """Immutable result of a successful upload."""
    url: str
    metadata: FileMetadata
    status: UploadStatus = UploadStatus.SUCCESS

    @property
    def success(self) -> bool:
        return self.status == UploadStatus.SUCCESS


@dataclass(frozen=True)
class ErrorResult:
    """Error envelope returned by the API."""
    message: str
    status: UploadStatus = UploadStatus.ERROR


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable configuration for BucketClient.

    base_url of None means DEFAULT_BASE_URL. Policy fields default to the
    service limits and may be overridden per client.
    """
    api_key: str
    base_url: Optional[str] = None
    endpoint: str = UPLOAD_ENDPOINT
    max_file_size: int = MAX_FILE_SIZE
    allowed_extensions: FrozenSet[str] = field(default=ALLOWED_EXTENSIONS)
    timeout: float = DEFAULT_TIMEOUT

    @property
    def resolved_base_url(self) -> str:
        return (self.base_url or DEFAULT_BASE_URL).rstrip("/")

    @property
    def upload_url(self) -> str:
        return f"{self.resolved_base_url}{self.endpoint}"

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "ClientConfig":
        """
        Build config from BUCKET_API_KEY, BUCKET_BASE_URL and BUCKET_TIMEOUT.

        Raises:
            ConfigError: API key missing or timeout not a number
        """
        env = os.environ if environ is None else environ
        api_key = env.get("BUCKET_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("BUCKET_API_KEY environment variable is not set")

        raw_timeout = env.get("BUCKET_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigError(f"BUCKET_TIMEOUT is not a number: {raw_timeout!r}") from exc

        return cls(
            api_key=api_key,
            base_url=env.get("BUCKET_BASE_URL") or None,
            timeout=timeout,
        )


def parse_response(payload: Union[bytes, str]) -> Union[UploadResult, ErrorResult]:
    """
    Decode an API response body into a typed envelope.

    The body is parsed once and dispatched on its ``status`` field.

    Raises:
        DecodeError: body is not JSON, has a non-string status, or its fields
            do not match the shape its status requires
        UnknownStatusError: status is neither "success" nor "error"
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"failed to decode response: {exc}") from exc

    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")

    status = data.get("status")
    if status is not None and not isinstance(status, str):
        raise DecodeError(f"response 'status' is not a string: {status!r}")

    if status == UploadStatus.SUCCESS.value:
        url = data.get("url")
        metadata = data.get("metadata")
        if not isinstance(url, str):
            raise DecodeError("success response is missing 'url'")
        if not isinstance(metadata, dict):
            raise DecodeError("success response is missing 'metadata'")
        return UploadResult(url=url, metadata=FileMetadata.from_dict(metadata))

    if status == UploadStatus.ERROR.value:
        message = data.get("message", "")
        if not isinstance(message, str):
            raise DecodeError("error response 'message' is not a string")
        return ErrorResult(message=message)

    raise UnknownStatusError(status)
