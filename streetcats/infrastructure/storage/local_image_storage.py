"""
Local disk storage for uploaded cat photos.

Files are written under the configured upload directory with a random name
that keeps the original extension; the directory is served at /uploads.
"""

# Standard library imports
import logging
import uuid
from pathlib import Path
from typing import Optional

# External package imports
from fastapi import UploadFile

# Local application imports
from ...domain.exceptions import InvalidInputError, UploadTooLargeError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}
CHUNK_SIZE = 1024 * 1024


class LocalImageStorage:
    """Stores image uploads on the local filesystem"""

    def __init__(self, upload_dir: str, max_mb: int) -> None:
        self.upload_dir = Path(upload_dir)
        self.max_mb = max_mb
        self.max_bytes = max_mb * 1024 * 1024

    def _ensure_dir(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    def path_for(self, filename: str) -> Path:
        return self.upload_dir / filename

    async def save(self, file: Optional[UploadFile]) -> str:
        """
        Validate and write an uploaded image

        Args:
            file: The uploaded file from a multipart form

        Returns:
            Stored file name (relative to the upload directory)

        Raises:
            InvalidInputError: If the file is missing or not an image
            UploadTooLargeError: If the file exceeds the size limit
        """
        if file is None or not file.filename:
            raise InvalidInputError("Image is required")

        if not (file.content_type or "").startswith("image/"):
            raise InvalidInputError("Only image files are allowed")

        ext = Path(file.filename).suffix.lower()
        if ext not in ALLOWED_EXTENSIONS:
            raise InvalidInputError("Invalid image file. Use: jpg, jpeg, png, gif, webp")

        safe_name = f"{uuid.uuid4().hex}{ext}"
        final_path = self._ensure_dir() / safe_name

        size = 0
        with open(final_path, "wb") as f:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > self.max_bytes:
                    f.close()
                    final_path.unlink(missing_ok=True)
                    raise UploadTooLargeError(f"File too large. Max {self.max_mb} MB.")
                f.write(chunk)

        logger.info(f"Stored image upload {safe_name} ({size} bytes)")
        return safe_name

    def delete(self, filename: str) -> None:
        """Remove a stored image; missing files are ignored"""
        if not filename:
            return
        path = self.path_for(Path(filename).name)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove image {filename}: {e}")
