"""Disk storage for uploaded images and export archives."""

import logging
import re
import time
from pathlib import Path
from uuid import uuid4

from fastapi import UploadFile

from src.config import get_settings

logger = logging.getLogger(__name__)

STORAGE_URL_PREFIX = "/storage/"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class InvalidUploadError(ValueError):
    """Uploaded file was rejected."""

    def __init__(self, message: str, error_code: str):
        self.error_code = error_code
        super().__init__(message)


def get_storage_dir() -> Path:
    """Return the storage directory, creating it if needed."""
    storage_dir = Path(get_settings().storage_dir)
    storage_dir.mkdir(parents=True, exist_ok=True)
    return storage_dir


def storage_url(filename: str) -> str:
    return f"{STORAGE_URL_PREFIX}{filename}"


def unique_filename(original_name: str | None) -> str:
    """Build "<epoch-ms>-<uuid>-<sanitized name>" for a stored file."""
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", Path(original_name or "upload").name)
    return f"{int(time.time() * 1000)}-{uuid4()}-{safe_name}"


async def save_image_upload(file: UploadFile) -> str:
    """Validate and store an uploaded image; return the stored filename."""
    if not file.content_type or not file.content_type.startswith("image/"):
        raise InvalidUploadError("Only image files allowed", "INVALID_FILE_TYPE")

    content = await file.read()
    max_bytes = get_settings().max_upload_bytes
    if len(content) > max_bytes:
        raise InvalidUploadError(
            f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB.", "FILE_TOO_LARGE"
        )

    filename = unique_filename(file.filename)
    (get_storage_dir() / filename).write_bytes(content)
    return filename


def stored_file_path(filename: str) -> Path | None:
    """Path of a stored file, or None if the name escapes the storage directory."""
    storage_dir = get_storage_dir().resolve()
    path = (storage_dir / filename).resolve()
    if path.parent != storage_dir:
        return None
    return path


def delete_stored_file(filename: str) -> bool:
    """Remove a file this service stored. Returns True if removed."""
    path = stored_file_path(filename)
    if path is None or not path.is_file():
        return False
    path.unlink()
    logger.info(f"Removed stored file {filename}")
    return True
