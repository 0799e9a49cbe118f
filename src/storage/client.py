"""
client.py — S3-compatible image storage
---------------------------------------

Thin wrapper over a boto3 S3 client for the category images bucket.

Objects are keyed `categories/<timestamp_ms>_<slug>` and served from
`<public_base_url>/<bucket>/<key>`. Uploads overwrite an existing key.

Environment / Settings:
- `STORAGE_ENDPOINT_URL`: S3 endpoint (MinIO, Spaces, Supabase S3, ...)
- `STORAGE_REGION`, `STORAGE_ACCESS_KEY`, `STORAGE_SECRET_KEY`
- `STORAGE_BUCKET`: bucket name (default "images")
- `STORAGE_PUBLIC_URL`: base URL public object URLs are built from
"""
import time
from functools import lru_cache
from typing import Iterable, Optional

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from src.config import get_settings
from src.constants import CATEGORY_IMAGES_PREFIX, IMAGE_CACHE_CONTROL
from src.logging_config import get_logger
from src.slugs import slugify_name

logger = get_logger(__name__)


def category_image_path(category_name: str, timestamp_ms: Optional[int] = None) -> str:
    """Object key for a category image: categories/<timestamp>_<slug>."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{CATEGORY_IMAGES_PREFIX}/{timestamp_ms}_{slugify_name(category_name)}"


def path_from_public_url(url: str) -> Optional[str]:
    """Recover the object key of a category image from its public URL."""
    if not url:
        return None
    name = url.rstrip("/").split("/")[-1]
    if not name:
        return None
    return f"{CATEGORY_IMAGES_PREFIX}/{name}"


class ImageStorage:
    """Upload, resolve and remove image objects in one bucket."""

    def __init__(self, client, bucket: str, public_base_url: str):
        self.client = client
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    def upload(self, path: str, data: bytes, content_type: str | None = None) -> None:
        """Put an object, replacing any existing one at the same key."""
        params = {
            "Bucket": self.bucket,
            "Key": path,
            "Body": data,
            "CacheControl": IMAGE_CACHE_CONTROL,
        }
        if content_type:
            params["ContentType"] = content_type
        self.client.put_object(**params)

    def get_public_url(self, path: str) -> str:
        return f"{self.public_base_url}/{self.bucket}/{path}"

    def remove(self, paths: Iterable[str]) -> None:
        """Delete objects; missing keys are not an error."""
        objects = [{"Key": p} for p in paths if p]
        if not objects:
            return
        self.client.delete_objects(Bucket=self.bucket, Delete={"Objects": objects, "Quiet": True})

    def upload_category_image(self, data: bytes, category_name: str, content_type: str | None = None) -> str:
        """
        Store a category image and return its public URL.

        Returns "" when the upload fails; the error is logged.
        """
        path = category_image_path(category_name)
        try:
            self.upload(path, data, content_type)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error uploading image {path}: {e}")
            return ""

        logger.info(f"🖼️ Uploaded category image {path}")
        return self.get_public_url(path)

    def remove_category_image(self, image_url: str) -> bool:
        """Best-effort removal of the object behind a category image URL."""
        path = path_from_public_url(image_url)
        if path is None:
            return False
        try:
            self.remove([path])
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error deleting image {path}: {e}")
            return False
        return True


@lru_cache
def get_storage() -> ImageStorage:
    """Build the storage wrapper from settings (dependency)."""
    settings = get_settings()
    session = boto3.session.Session()
    client = session.client(
        "s3",
        region_name=settings.storage_region,
        endpoint_url=settings.storage_endpoint_url,
        aws_access_key_id=settings.storage_access_key,
        aws_secret_access_key=settings.storage_secret_key,
        config=Config(signature_version="s3v4"),
    )
    return ImageStorage(client, settings.storage_bucket, settings.storage_public_url)
