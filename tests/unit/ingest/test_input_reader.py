"""Unit tests for the CSV source reader."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from core.config import CsvNestConfig
from core.errors import CsvNestIngestError
from ingest.input_reader import read_csv_content


class _FakeS3Client:
    def __init__(self, body: bytes) -> None:
        self._body = body
        self.requests: list[tuple[str, str]] = []

    def get_object(self, Bucket: str, Key: str) -> dict[str, io.BytesIO]:
        self.requests.append((Bucket, Key))
        return {"Body": io.BytesIO(self._body)}


def test_read_csv_content_reads_local_file(tmp_path: Path, config: CsvNestConfig) -> None:
    """Reader should return the whole local file content."""
    csv_path = tmp_path / "users.csv"
    csv_path.write_text("a,b\n1,2\n", encoding="utf-8")

    content = read_csv_content(str(csv_path), config)

    assert content == "a,b\n1,2\n"


def test_read_csv_content_strips_byte_order_mark(tmp_path: Path, config: CsvNestConfig) -> None:
    """A UTF-8 BOM should not leak into the first header name."""
    csv_path = tmp_path / "users.csv"
    csv_path.write_bytes(b"\xef\xbb\xbfage\n30\n")

    content = read_csv_content(str(csv_path), config)

    assert content.startswith("age")


def test_read_csv_content_raises_for_missing_file(tmp_path: Path, config: CsvNestConfig) -> None:
    """Reader should fail with the underlying message attached."""
    missing_path = tmp_path / "missing.csv"

    with pytest.raises(CsvNestIngestError, match="Failed to read file"):
        read_csv_content(str(missing_path), config)

    assert missing_path.exists() is False


def test_read_csv_content_downloads_s3_object(
    monkeypatch: pytest.MonkeyPatch,
    config: CsvNestConfig,
) -> None:
    """S3 sources should be fetched through the boto3 client."""
    fake_client = _FakeS3Client(b"age\n41\n")
    monkeypatch.setattr("ingest.input_reader._create_s3_client", lambda _config: fake_client)

    content = read_csv_content("s3://uploads/batches/users.csv", config)

    assert content == "age\n41\n"
    assert fake_client.requests == [("uploads", "batches/users.csv")]


def test_read_csv_content_rejects_s3_uri_without_key(config: CsvNestConfig) -> None:
    """An S3 URI must name a single object."""
    with pytest.raises(CsvNestIngestError, match="Invalid S3 URI"):
        read_csv_content("s3://uploads", config)
