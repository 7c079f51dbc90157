"""
Portfolio Backend — Upload Storage Service
============================================

What:  Writes uploaded images to the upload directory and removes them again.
Why:   Skills and projects accept one optional image each. The file goes to
       disk and only its relative path goes to the database.
How:   Filenames are <millisecond-timestamp><original-extension>. The
       relative path stored in the database is the URL prefix segment joined
       with that filename ("uploads/1700000000000.png"), which is also the
       path the static file server answers on.
Who:   Called by SkillService and ProjectService.
When:  Before the row is inserted/updated; on skill deletion for cleanup.

Naming Model:
    Timestamps make collisions unlikely but not impossible (two uploads in
    the same millisecond). Files are opened with exclusive create; on a clash
    the timestamp is advanced one millisecond and the write retried, so names
    keep the same shape and an existing upload is never overwritten.

What is NOT done here:
    - No extension, MIME or size validation (values pass through as-is)
    - No cleanup of superseded images on update, or of files whose row
      insert later fails
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional

import aiofiles
import aiofiles.os

from portfolio_api.exceptions import FileStorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedImage:
    """
    Result of storing one upload.

    Attributes:
        filename:      Name inside the upload directory
        relative_path: Value persisted in the image_path column
        absolute_path: File on disk (served under the upload URL prefix)
    """
    filename: str
    relative_path: str
    absolute_path: str


class FileService:
    """
    Manages the upload directory.

    Directory Structure (flat, served 1:1 under the URL prefix):
        uploads/
        ├── 1700000000000.png
        └── 1700000004211.jpg
    """

    def __init__(self, upload_dir: str, url_prefix: str = "/uploads"):
        """
        Args:
            upload_dir: Directory receiving uploads; created if absent.
            url_prefix: URL prefix the directory is served under.
        """
        self.upload_dir = Path(upload_dir).resolve()
        self.url_prefix = "/" + url_prefix.strip("/")
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        logger.info("FileService initialized with upload_dir=%s", self.upload_dir)

    def relative_path_for(self, filename: str) -> str:
        """'1700000000000.png' -> 'uploads/1700000000000.png'"""
        return f"{self.url_prefix.lstrip('/')}/{filename}"

    def resolve(self, image_path: str) -> Path:
        """
        Map a stored image_path back to its file in the upload directory.

        Only the final path component is used, so both the relative form
        ("uploads/<file>") and absolute paths written by older deployments
        resolve to the same place, and nothing outside the directory is reached.
        """
        return self.upload_dir / PurePosixPath(image_path.replace("\\", "/")).name

    async def save(self, content: bytes, original_filename: Optional[str]) -> UploadedImage:
        """
        Write an uploaded image and return its paths.

        Args:
            content: Raw bytes of the upload
            original_filename: Client-side filename; only its extension is kept

        Raises:
            FileStorageError if the file cannot be written.
        """
        extension = Path(original_filename or "").suffix
        timestamp = int(time.time() * 1000)

        while True:
            filename = f"{timestamp}{extension}"
            absolute_path = self.upload_dir / filename
            try:
                # 'xb': exclusive create; fails instead of overwriting
                async with aiofiles.open(absolute_path, "xb") as f:
                    await f.write(content)
                break
            except FileExistsError:
                timestamp += 1
            except OSError as e:
                logger.error("Failed to store upload at %s: %s", absolute_path, str(e))
                raise FileStorageError(
                    context={"path": str(absolute_path), "os_error": str(e)},
                )

        relative_path = self.relative_path_for(filename)
        logger.info("File stored: %s (%d bytes)", relative_path, len(content))
        return UploadedImage(
            filename=filename,
            relative_path=relative_path,
            absolute_path=str(absolute_path),
        )

    async def remove(self, image_path: str) -> bool:
        """
        Best-effort deletion of a stored image.

        Returns True when the file was removed. Any OS error (missing file,
        permissions) is logged and reported as False, never raised: the
        caller goes on to delete the row regardless.
        """
        path = self.resolve(image_path)
        try:
            await aiofiles.os.remove(path)
        except OSError as e:
            logger.error("Error deleting image file %s: %s", path, str(e))
            return False
        logger.info("Removed image file: %s", path.name)
        return True
