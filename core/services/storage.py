"""
Image Storage Service

Product and category images live in a Supabase Storage bucket.
Uploads are validated (image/* content type, size ceiling) before the
storage API is called.
"""
import secrets
import string
import time
from typing import Optional
from urllib.parse import unquote, urlparse

from supabase._async.client import AsyncClient

from core import config
from core.errors import (
    ERROR_IMAGE_TOO_LARGE,
    ERROR_NOT_AN_IMAGE,
    ImageValidationError,
    RemoteCallError,
)
from core.logging import get_logger

logger = get_logger(__name__)

_ALPHABET = string.ascii_lowercase + string.digits


def validate_image(content_type: Optional[str], size: int, max_bytes: int = config.MAX_UPLOAD_BYTES) -> None:
    """Reject anything that is not an image or is larger than max_bytes."""
    if not content_type or not content_type.startswith("image/"):
        raise ImageValidationError(ERROR_NOT_AN_IMAGE)
    if size > max_bytes:
        raise ImageValidationError(ERROR_IMAGE_TOO_LARGE)


def build_object_path(folder: str, filename: str) -> str:
    """Unique object path: {folder}/{epoch_ms}-{random}.{ext}"""
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
    token = "".join(secrets.choice(_ALPHABET) for _ in range(11))
    return f"{folder.strip('/')}/{int(time.time() * 1000)}-{token}.{ext}"


class ImageStorage:
    """Upload/remove/resolve public URLs for images in one bucket."""

    def __init__(self, client: AsyncClient, bucket: str = config.STORAGE_BUCKET):
        self.client = client
        self.bucket = bucket

    async def upload(self, folder: str, filename: str, content: bytes, content_type: Optional[str]) -> str:
        """Validate and upload an image; returns its public URL."""
        validate_image(content_type, len(content))
        path = build_object_path(folder, filename)

        try:
            await self.client.storage.from_(self.bucket).upload(
                path,
                content,
                {"content-type": content_type},
            )
        except Exception as e:
            logger.error(f"Upload to {self.bucket}/{path} failed: {e}")
            raise RemoteCallError("upload image", e) from e

        logger.info(f"Uploaded image to {self.bucket}/{path}")
        return await self.get_public_url(path)

    async def get_public_url(self, path: str) -> str:
        return await self.client.storage.from_(self.bucket).get_public_url(path)

    def path_from_public_url(self, url: str) -> Optional[str]:
        """Object path inside this bucket for a public URL, or None for foreign URLs."""
        if not url:
            return None
        parsed = urlparse(url)
        marker = f"/{self.bucket}/"
        if marker not in parsed.path:
            return None
        path = unquote(parsed.path.split(marker, 1)[1])
        return path or None

    async def remove(self, path: str) -> None:
        try:
            await self.client.storage.from_(self.bucket).remove([path])
        except Exception as e:
            raise RemoteCallError("remove image", e) from e

    async def remove_by_url(self, url: str) -> bool:
        """
        Best-effort removal of an image referenced by public URL.

        URLs outside the bucket are ignored. Failures are logged, never raised.
        """
        path = self.path_from_public_url(url)
        if not path:
            return False
        try:
            await self.remove(path)
            return True
        except RemoteCallError as e:
            logger.warning(f"Could not remove image {path}: {e}")
            return False
