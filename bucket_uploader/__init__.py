"""
bucket_uploader - Client for the Bucket file storage API.

Validates a local file against the service policy (size ceiling and
extension allow-list), uploads it as a multipart form and decodes the
JSON envelope into an UploadResult or a BucketError.

Usage:
    from bucket_uploader import BucketClient

    with BucketClient("your-api-key") as client:
        result = client.upload("report.pdf")
        print(result.url, result.metadata.file_size)

    # Custom policy or origin
    config = ClientConfig(api_key="key", base_url="http://localhost:8080",
                          max_file_size=10 * 1024 * 1024)
    client = BucketClient(config=config)
"""
__version__ = "0.1.0"

from .errors import (
    BucketError,
    ConfigError,
    DecodeError,
    FileAccessError,
    MissingFileError,
    RemoteError,
    ServerError,
    TransportError,
    UnknownStatusError,
    ValidationError,
)
from .models import (
    ClientConfig,
    ErrorResult,
    FileMetadata,
    UploadResult,
    UploadStatus,
    parse_response,
)
from .services import BucketClient, FileValidator

__all__ = [
    # Main
    "BucketClient",
    "FileValidator",
    # Models
    "ClientConfig",
    "ErrorResult",
    "FileMetadata",
    "UploadResult",
    "UploadStatus",
    "parse_response",
    # Errors
    "BucketError",
    "ConfigError",
    "DecodeError",
    "FileAccessError",
    "MissingFileError",
    "RemoteError",
    "ServerError",
    "TransportError",
    "UnknownStatusError",
    "ValidationError",
]
