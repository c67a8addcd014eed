"""
S3-compatible object storage client

Wraps the blocking boto3 client; every call runs in a worker thread so
request coroutines only suspend while the transfer is in flight.
"""

import asyncio
from typing import Optional
from urllib.parse import unquote, urlparse

import boto3
from botocore.config import Config as BotoConfig

from app.core.config import Config, config as default_config
from app.core.logger import logger


class S3ObjectStorage:
    """Stores public image objects in an S3 (or MinIO) bucket"""

    def __init__(self, settings: Config = default_config, client=None):
        self.bucket_name = settings.s3_bucket_name
        self.endpoint_url = settings.s3_endpoint_url
        self.region = settings.s3_region
        self.public_base_url = (settings.s3_public_base_url or "").rstrip("/") or None
        self._configured = settings.storage_configured
        self._settings = settings
        self._client = client

    @property
    def is_configured(self) -> bool:
        """Whether bucket and credentials are present"""
        return self._configured

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                "s3",
                region_name=self.region,
                endpoint_url=self.endpoint_url,
                aws_access_key_id=self._settings.s3_access_key_id,
                aws_secret_access_key=self._settings.s3_secret_access_key,
                config=BotoConfig(signature_version="s3v4", s3={"addressing_style": "path"}),
            )
        return self._client

    def public_url(self, key: str) -> str:
        """Public URL at which an uploaded object is served"""
        if self.public_base_url:
            return f"{self.public_base_url}/{key}"
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket_name}/{key}"
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"

    def key_from_url(self, url: str) -> Optional[str]:
        """
        Best-effort recovery of an object key from a stored URL.

        Query string and fragment are ignored. The public base path, or a
        leading bucket segment for path-style URLs, is stripped when present.
        """
        if not url:
            return None

        path = unquote(urlparse(url).path).lstrip("/")

        if self.public_base_url:
            base_path = urlparse(self.public_base_url).path.strip("/")
            if base_path and path.startswith(base_path + "/"):
                path = path[len(base_path) + 1:]

        if self.bucket_name and path.startswith(self.bucket_name + "/"):
            path = path[len(self.bucket_name) + 1:]

        return path or None

    async def put_object(self, key: str, data: bytes, content_type: Optional[str] = None) -> str:
        """Upload bytes under key and return the public URL"""
        extra_args = {"ContentType": content_type} if content_type else {}
        await asyncio.to_thread(
            self.client.put_object,
            Bucket=self.bucket_name,
            Key=key,
            Body=data,
            ContentLength=len(data),
            **extra_args,
        )
        logger.debug(
            "Object uploaded",
            metadata={"event": "object_uploaded", "bucket": self.bucket_name, "key": key, "size": len(data)}
        )
        return self.public_url(key)

    async def delete_object(self, key: str) -> None:
        await asyncio.to_thread(self.client.delete_object, Bucket=self.bucket_name, Key=key)
        logger.debug(
            "Object deleted",
            metadata={"event": "object_deleted", "bucket": self.bucket_name, "key": key}
        )
