"""
Image upload coordination

Takes in-memory files from a multipart request, pushes them to object
storage concurrently and hands back their public URLs. A request either gets
every URL or an error; never a partial list.
"""

import asyncio
import mimetypes
import os
import uuid
from typing import List, Optional, Sequence

from pydantic import BaseModel

from app.clients.object_storage import S3ObjectStorage
from app.core.config import config
from app.core.errors import (
    NoFilesProvided,
    PayloadTooLarge,
    ServiceUnavailable,
    UploadFailed,
    ValidationError,
)
from app.core.logger import logger


class UploadedFile(BaseModel):
    """A file received in a request, fully buffered"""
    filename: Optional[str] = None
    content_type: Optional[str] = None
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def _format_size(size: int) -> str:
    return f"{size / (1024 * 1024):g}MB"


class ImageUploadService:
    """Uploads and deletes catalog images in object storage"""

    def __init__(
        self,
        storage: S3ObjectStorage,
        max_file_size: int = config.max_upload_size,
        concurrency: int = config.upload_concurrency,
    ):
        self.storage = storage
        self.max_file_size = max_file_size
        self.concurrency = max(1, concurrency)

    @staticmethod
    def _object_key(folder: str, upload: UploadedFile) -> str:
        extension = ""
        if upload.filename:
            extension = os.path.splitext(upload.filename)[1].lower()
        if not extension and upload.content_type:
            extension = mimetypes.guess_extension(upload.content_type) or ""
        return f"{folder.strip('/')}/{uuid.uuid4().hex}{extension}"

    def _check_request(self, files: Sequence[UploadedFile], max_files: Optional[int]) -> None:
        if not self.storage.is_configured:
            raise ServiceUnavailable()

        if not files:
            raise NoFilesProvided()

        if max_files is not None and len(files) > max_files:
            raise ValidationError(
                f"Too many files. Maximum is {max_files}.",
                details={"max_files": max_files, "received": len(files)},
            )

        for upload in files:
            if upload.size > self.max_file_size:
                raise PayloadTooLarge(
                    f"File too large. Maximum size is {_format_size(self.max_file_size)}.",
                    details={"filename": upload.filename, "size": upload.size, "max_size": self.max_file_size},
                )

    async def upload(
        self,
        files: Sequence[UploadedFile],
        folder: str,
        max_files: Optional[int] = None,
    ) -> List[str]:
        """
        Upload every file under folder and return the URLs in input order.

        All files are checked before anything is sent. If any single upload
        fails, the ones that succeeded are removed again and UploadFailed is
        raised.
        """
        self._check_request(files, max_files)

        semaphore = asyncio.Semaphore(self.concurrency)

        async def upload_one(upload: UploadedFile) -> str:
            async with semaphore:
                key = self._object_key(folder, upload)
                return await self.storage.put_object(key, upload.data, upload.content_type)

        results = await asyncio.gather(*(upload_one(f) for f in files), return_exceptions=True)

        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            uploaded = [result for result in results if isinstance(result, str)]
            logger.error(
                "Image upload failed",
                error=failures[0],
                metadata={
                    "event": "image_upload_failed",
                    "folder": folder,
                    "total": len(files),
                    "failed": len(failures),
                },
            )
            if uploaded:
                await self.delete_many(uploaded)
            raise UploadFailed(details={"total": len(files), "failed": len(failures)}) from failures[0]

        logger.info(
            f"Uploaded {len(results)} image(s)",
            metadata={"event": "images_uploaded", "folder": folder, "count": len(results)},
        )
        return list(results)

    async def delete_by_url(self, url: str) -> bool:
        """
        Best-effort removal of the object behind url.

        Never raises; failures are logged and reported as False.
        """
        if not self.storage.is_configured:
            return False

        key = self.storage.key_from_url(url)
        if not key:
            logger.warning(
                "Could not derive storage key from image URL",
                metadata={"event": "image_delete_skipped", "url": url},
            )
            return False

        try:
            await self.storage.delete_object(key)
        except Exception as e:
            logger.warning(
                "Error deleting image from storage",
                error=e,
                metadata={"event": "image_delete_failed", "url": url, "key": key},
            )
            return False
        return True

    async def delete_many(self, urls: Sequence[str]) -> int:
        """Best-effort removal of several objects; returns how many were deleted"""
        if not urls:
            return 0
        results = await asyncio.gather(*(self.delete_by_url(url) for url in urls))
        return sum(1 for deleted in results if deleted)
