"""Store uploaded files (director photos) under the configured upload directory."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from fastapi import UploadFile

if TYPE_CHECKING:
    from nonprofit.core.config import Settings

logger = logging.getLogger(__name__)

# Read uploads in chunks so the size limit is enforced before the whole file is in memory.
CHUNK_SIZE = 64 * 1024
URL_PREFIX = "uploads"


class UploadError(Exception):
    """Raised when an upload is missing, empty or too large."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class StoredFile:
    filename: str
    path: str


def ensure_upload_dir(settings: "Settings") -> Path:
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def safe_filename(original: str) -> str:
    """Strip directories and characters that do not belong in a file name."""
    # PurePath handles "/" only; browsers on Windows may send backslashes.
    name = PurePath(original.replace("\\", "/")).name
    cleaned = "".join(c if c.isalnum() or c in "._-" else "_" for c in name).strip("._")
    return cleaned or "upload"


def generate_filename(original: str, now_ms: int | None = None) -> str:
    """<epoch millis>-<original name>, unique enough for one owner uploading by hand."""
    stamp = now_ms if now_ms is not None else time.time_ns() // 1_000_000
    return f"{stamp}-{safe_filename(original)}"


def store_upload(file: UploadFile | None, settings: "Settings") -> StoredFile:
    """
    Write file to UPLOAD_DIR under a generated name.

    Returns the stored name and the relative path (uploads/<name>) that is
    saved on records and served statically. Raises UploadError on a missing,
    empty or oversized file; a partial file is removed.

    Reads and writes block, so callers are sync endpoints (run in the threadpool).
    """
    if file is None or not file.filename:
        raise UploadError("An image file is required")

    upload_dir = ensure_upload_dir(settings)
    filename = generate_filename(file.filename)
    target = upload_dir / filename

    written = 0
    try:
        with target.open("wb") as out:
            while True:
                chunk = file.file.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > settings.MAX_UPLOAD_BYTES:
                    raise UploadError(
                        f"File size must not exceed {settings.MAX_UPLOAD_BYTES // (1024 * 1024)} MB."
                    )
                out.write(chunk)
        if written == 0:
            raise UploadError("Uploaded file is empty")
    except UploadError:
        target.unlink(missing_ok=True)
        raise

    logger.info("Stored upload: filename=%s bytes=%s", filename, written)
    return StoredFile(filename=filename, path=f"{URL_PREFIX}/{filename}")


def delete_stored_file(path: str | None, settings: "Settings") -> None:
    """Remove a previously stored file given its record path; missing files are ignored."""
    if not path:
        return
    target = Path(settings.UPLOAD_DIR) / PurePath(path).name
    try:
        target.unlink(missing_ok=True)
    except OSError:
        logger.warning("Could not remove stored upload: path=%s", path, exc_info=True)
