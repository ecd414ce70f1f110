"""
Validator Service - Single Responsibility: enforce the local upload policy.

Checks existence, size and extension before any bytes are read.
"""
import logging
import stat
from pathlib import Path
from typing import Iterable, Union

from ..constants import ALLOWED_EXTENSIONS, MAX_FILE_SIZE
from ..errors import FileAccessError, MissingFileError, ValidationError

logger = logging.getLogger(__name__)


class FileValidator:
    """Validates local files against a size ceiling and an extension allow-list."""

    def __init__(
        self,
        max_file_size: int = MAX_FILE_SIZE,
        allowed_extensions: Iterable[str] = ALLOWED_EXTENSIONS,
    ):
        self._max_file_size = max_file_size
        self._allowed_extensions = frozenset(ext.lower() for ext in allowed_extensions)

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    @staticmethod
    def extension_of(path: Union[str, Path]) -> str:
        return Path(path).suffix.lower()

    def is_allowed(self, path: Union[str, Path]) -> bool:
        return self.extension_of(path) in self._allowed_extensions

    def validate(self, path: Union[str, Path]) -> int:
        """
        Validate file and return its size in bytes.

        Only stats the file; it is never opened here.

        Raises:
            MissingFileError: path does not exist
            FileAccessError: path cannot be stat'd or is not a regular file
            ValidationError: size above the ceiling or extension not allowed
        """
        path = Path(path)
        try:
            info = path.stat()
        except FileNotFoundError as exc:
            raise MissingFileError(f"failed to stat file: {exc}", path) from exc
        except OSError as exc:
            raise FileAccessError(f"failed to stat file: {exc}", path) from exc

        if not stat.S_ISREG(info.st_mode):
            raise FileAccessError(f"not a regular file: {path}", path)

        size = info.st_size
        if size > self._max_file_size:
            limit_mb = self._max_file_size / (1024 * 1024)
            logger.debug(f"Rejected {path.name}: {size} bytes over {self._max_file_size}")
            raise ValidationError(f"file exceeds maximum size of {limit_mb:g}MB", path)

        ext = self.extension_of(path)
        if ext not in self._allowed_extensions:
            logger.debug(f"Rejected {path.name}: extension {ext!r} not allowed")
            raise ValidationError(f"unsupported file type: {ext or '(none)'}", path)

        return size
