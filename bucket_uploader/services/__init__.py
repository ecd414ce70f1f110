"""Services for bucket_uploader."""
from .api_client import BucketClient
from .validator import FileValidator

__all__ = [
    "BucketClient",
    "FileValidator",
]
