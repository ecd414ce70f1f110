"""HTTP adapter for the Bucket storage upload API."""
from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Optional, Union

import httpx

from ..errors import FileAccessError, RemoteError, ServerError, TransportError
from ..models import ClientConfig, ErrorResult, UploadResult, parse_response
from .validator import FileValidator

logger = logging.getLogger(__name__)


class BucketClient:
    """
    Upload client for the Bucket storage API.

    Owns a single httpx.Client created at construction and reused by every
    call. Either pass a full ClientConfig or the api_key/base_url shortcuts.

    Usage:
        with BucketClient("your-api-key") as client:
            result = client.upload("photo.png")
            print(result.url)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if config is None:
            config = ClientConfig(api_key=api_key or "", base_url=base_url)
        self._config = config
        self._validator = FileValidator(config.max_file_size, config.allowed_extensions)
        self._client = httpx.Client(timeout=config.timeout, transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        self._client.close()

    def upload(self, path: Union[str, Path]) -> UploadResult:
        """
        Upload a single file and return the API result.

        The whole file is buffered in memory. Nothing is retried.

        Raises:
            MissingFileError, FileAccessError: file cannot be stat'd or read
            ValidationError: file violates size or extension policy
            TransportError: request failed before a response arrived
            ServerError: HTTP status other than 200
            DecodeError: response body is not a valid envelope
            RemoteError: API reported an error
            UnknownStatusError: unrecognized envelope status
        """
        path = Path(path)
        size = self._validator.validate(path)

        try:
            with open(path, "rb") as f:
                content = f.read()
        except OSError as exc:
            raise FileAccessError(f"failed to read file: {exc}", path) from exc

        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        url = self._config.upload_url
        logger.info(f"Uploading {path.name} ({size} bytes) to {url}")

        try:
            response = self._client.post(
                url,
                data={"apikey": self._config.api_key},
                files={"file": (path.name, content, content_type)},
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning(f"Upload of {path.name} failed to send: {exc}")
            raise TransportError(f"failed to send request: {exc}") from exc

        body = response.text
        if response.status_code != httpx.codes.OK:
            logger.warning(f"Upload of {path.name} rejected with HTTP {response.status_code}")
            raise ServerError(response.status_code, body)

        envelope = parse_response(response.content)
        if isinstance(envelope, ErrorResult):
            logger.warning(f"Upload of {path.name} refused by API: {envelope.message}")
            raise RemoteError(envelope.message)

        logger.debug(f"Uploaded {path.name}: {envelope.url}")
        return envelope
