import logging
import os
import re
import time
from typing import Optional

from fastapi import UploadFile

from app.config import init_settings
from app.exceptions import ClientInputError, ErrorCode

logger = logging.getLogger(__name__)
settings = init_settings()

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class UploadStorage:
    """
    Local disk store for uploaded leaf photos.

    Files live in `upload_dir`; callers only ever see the public path
    `<url_prefix>/<stored name>` under which the app serves that directory.
    """

    def __init__(
            self,
            upload_dir: str = settings.UPLOAD_DIR,
            max_bytes: int = settings.MAX_UPLOAD_BYTES,
            url_prefix: str = settings.UPLOAD_URL_PREFIX,
    ):
        self.upload_dir = upload_dir
        self.max_bytes = max_bytes
        self.url_prefix = "/" + url_prefix.strip("/")

    def ensure_dir(self):
        os.makedirs(self.upload_dir, exist_ok=True)

    @staticmethod
    def safe_name(filename: Optional[str]) -> str:
        name = os.path.basename(filename or "") or "upload.jpg"
        name = _UNSAFE_CHARS.sub("_", name).strip("._")
        return name or "upload.jpg"

    def public_path(self, stored_name: str) -> str:
        return f"{self.url_prefix}/{stored_name}"

    def local_path(self, public_path: str) -> str:
        """Filesystem location of a file previously returned by save()"""
        return os.path.join(self.upload_dir, os.path.basename(public_path))

    async def read_image(self, file: Optional[UploadFile]) -> bytes:
        """Read an upload, rejecting anything that is not a small image."""
        if file is None or not file.filename:
            raise ClientInputError(ErrorCode.NO_IMAGE)
        if not (file.content_type or "").startswith("image/"):
            raise ClientInputError(ErrorCode.NOT_AN_IMAGE)

        # read one byte past the limit so oversized files are detected without loading them whole
        data = await file.read(self.max_bytes + 1)
        if not data:
            raise ClientInputError(ErrorCode.NO_IMAGE)
        if len(data) > self.max_bytes:
            raise ClientInputError(ErrorCode.IMAGE_TOO_LARGE, limit_mb=f"{self.max_bytes / (1024 * 1024):g}")
        return data

    def save(self, data: bytes, filename: Optional[str]) -> str:
        """Write the upload and return its public path."""
        self.ensure_dir()
        stored_name = f"{int(time.time() * 1000)}-{self.safe_name(filename)}"
        path = os.path.join(self.upload_dir, stored_name)
        with open(path, "wb") as f:
            f.write(data)
        logger.info(f"💾 Saved upload to {path}")
        return self.public_path(stored_name)
