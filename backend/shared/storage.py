"""
Blob store access for Supabase Storage.

Used for avatars and space images. Uploads are validated for size before
any remote call, stored under ``{owner_id}/{uuid}.{ext}`` and exposed
through public URLs.
"""

import logging
import uuid
from pathlib import PurePosixPath
from typing import Optional

import httpx
from storage3.exceptions import StorageApiError
from supabase import Client

from .exceptions import ExternalServiceError, FileTooLargeError, ValidationError

logger = logging.getLogger(__name__)


class BlobStore:
    """Thin wrapper over ``client.storage`` with size checks and error translation."""

    def __init__(self, db: Client) -> None:
        self._db = db

    def upload(
        self,
        bucket: str,
        owner_id: str,
        filename: str,
        content: bytes,
        content_type: Optional[str],
        max_bytes: int,
    ) -> str:
        """
        Upload a file and return its public URL.

        Raises:
            ValidationError: If the file is empty
            FileTooLargeError: If the file exceeds max_bytes
            ExternalServiceError: If Supabase Storage rejects the upload
        """
        if not content:
            raise ValidationError("File is empty", code="EMPTY_FILE")
        if len(content) > max_bytes:
            raise FileTooLargeError(len(content), max_bytes)

        ext = PurePosixPath(filename or "").suffix.lstrip(".").lower() or "bin"
        path = f"{owner_id}/{uuid.uuid4().hex}.{ext}"
        options = {"upsert": "true"}
        if content_type:
            options["content-type"] = content_type

        bucket_api = self._db.storage.from_(bucket)
        try:
            bucket_api.upload(path, content, file_options=options)
        except (StorageApiError, httpx.HTTPError) as e:
            logger.warning("Upload to %s/%s failed: %s", bucket, path, e)
            raise ExternalServiceError(
                str(e) or "Upload failed",
                service="supabase_storage",
                details={"bucket": bucket},
            ) from e

        return bucket_api.get_public_url(path)
