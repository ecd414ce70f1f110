"""Shared fixtures for bucket_uploader tests."""
import json

import httpx
import pytest

SUCCESS_BODY = {
    "status": "success",
    "url": "https://x/y.png",
    "metadata": {
        "original_name": "y.png",
        "file_type": "image/png",
        "file_size": 123,
        "upload_time": "2024-01-01T00:00:00Z",
    },
}


@pytest.fixture
def success_body():
    return dict(SUCCESS_BODY)


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "y.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"0" * 115)
    return path


@pytest.fixture
def recorder():
    """MockTransport factory that records every request it answers."""

    class Recorder:
        def __init__(self):
            self.requests = []
            self.status_code = 200
            self.body = json.dumps(SUCCESS_BODY).encode()
            self.exc = None

        def handler(self, request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            if self.exc is not None:
                raise self.exc
            return httpx.Response(self.status_code, content=self.body)

        @property
        def transport(self) -> httpx.MockTransport:
            return httpx.MockTransport(self.handler)

    return Recorder()
