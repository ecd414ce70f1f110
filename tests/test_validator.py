"""Tests for the local file policy."""
from pathlib import Path

import pytest

from bucket_uploader.errors import FileAccessError, MissingFileError, ValidationError
from bucket_uploader.services.validator import FileValidator


class TestFileValidator:
    def test_extension_of_is_lowercase(self):
        assert FileValidator.extension_of(Path("photo.PNG")) == ".png"
        assert FileValidator.extension_of("backup.tar.gz") == ".gz"
        assert FileValidator.extension_of("Makefile") == ""

    def test_is_allowed_case_insensitive(self):
        validator = FileValidator()
        assert validator.is_allowed("a.png") is True
        assert validator.is_allowed("a.PNG") is True
        assert validator.is_allowed("a.exe") is False

    def test_validate_returns_size(self, tmp_path):
        path = tmp_path / "notes.TXT"
        path.write_bytes(b"hello")
        assert FileValidator().validate(path) == 5

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingFileError) as exc_info:
            FileValidator().validate(tmp_path / "nope.png")
        assert exc_info.value.path == tmp_path / "nope.png"

    def test_directory_rejected(self, tmp_path):
        folder = tmp_path / "dir.zip"
        folder.mkdir()
        with pytest.raises(FileAccessError):
            FileValidator().validate(folder)

    def test_too_large(self, tmp_path):
        path = tmp_path / "big.png"
        path.write_bytes(b"x" * 11)
        with pytest.raises(ValidationError, match="maximum size"):
            FileValidator(max_file_size=10).validate(path)

    def test_size_at_ceiling_allowed(self, tmp_path):
        path = tmp_path / "edge.png"
        path.write_bytes(b"x" * 10)
        assert FileValidator(max_file_size=10).validate(path) == 10

    def test_default_ceiling_sparse_file(self, tmp_path):
        path = tmp_path / "huge.zip"
        with open(path, "wb") as f:
            f.truncate(100 * 1024 * 1024 + 1)
        with pytest.raises(ValidationError):
            FileValidator().validate(path)

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "tool.exe"
        path.write_bytes(b"MZ")
        with pytest.raises(ValidationError, match="unsupported file type: .exe"):
            FileValidator().validate(path)

    def test_custom_allow_list(self, tmp_path):
        path = tmp_path / "tool.exe"
        path.write_bytes(b"MZ")
        validator = FileValidator(allowed_extensions={".EXE"})
        assert validator.validate(path) == 2
