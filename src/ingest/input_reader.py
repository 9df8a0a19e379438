"""CSV source readers for ingestion.

This module loads the whole CSV document from a local path or an
S3 object into memory. Any read failure is fatal to the run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.config import CsvNestConfig
from core.errors import CsvNestDependencyError, CsvNestIngestError
from core.s3_uri import S3Location, is_s3_uri, parse_s3_uri

_SOURCE_ENCODING = "utf-8-sig"


def read_csv_content(source_uri: str, config: CsvNestConfig) -> str:
    """Load CSV text from a local file or S3.

    Args:
        source_uri: Local file path or ``s3://bucket/key`` URI.
        config: Runtime configuration for S3 session defaults.

    Returns:
        Decoded document text.

    Raises:
        CsvNestIngestError: If the source cannot be read.
    """
    if is_s3_uri(source_uri):
        return _read_s3_content(parse_s3_uri(source_uri), config)
    return _read_local_content(Path(source_uri).expanduser())


def _read_local_content(source_path: Path) -> str:
    """Read a local CSV file.

    Args:
        source_path: Input file path.

    Returns:
        Decoded file content.

    Raises:
        CsvNestIngestError: If the file is missing or unreadable.
    """
    try:
        return source_path.read_text(encoding=_SOURCE_ENCODING)
    except (OSError, UnicodeDecodeError) as error:
        raise CsvNestIngestError(f"Failed to read file: {error}") from error


def _read_s3_content(location: S3Location, config: CsvNestConfig) -> str:
    """Download and decode one S3 object.

    Args:
        location: Target bucket and key.
        config: Runtime config for region/profile.

    Returns:
        Decoded object body.

    Raises:
        CsvNestIngestError: If the download or decode fails.
    """
    s3_client = _create_s3_client(config)
    try:
        body = s3_client.get_object(Bucket=location.bucket, Key=location.key)["Body"].read()
        return body.decode(_SOURCE_ENCODING)
    except Exception as error:
        raise CsvNestIngestError(
            f"Failed to read file: s3://{location.bucket}/{location.key}: {error}"
        ) from error


def _create_s3_client(config: CsvNestConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        CsvNestDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise CsvNestDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install csvnest[s3] to read s3:// sources."
        ) from error
    session_kwargs = _build_boto3_session_kwargs(config)
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _build_boto3_session_kwargs(config: CsvNestConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config."""
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
