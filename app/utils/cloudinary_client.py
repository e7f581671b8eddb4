import base64
import logging
from typing import Optional

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from app.core.config import Settings
from app.core.errors import UploadError


logger = logging.getLogger(__name__)


def to_data_uri(content: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(content).decode('ascii')}"


def upload_to_cloudinary(
    content: bytes,
    mime_type: str,
    resource_type: str,
    settings: Optional[Settings] = None,
) -> str:
    """Sube un fichero a Cloudinary y devuelve su secure_url."""
    credentials = settings.cloudinary_credentials if settings is not None else None
    if credentials is None:
        raise UploadError("Media hosting is not configured (cloudinary_url is missing)")
    cloud_name, api_key, api_secret = credentials

    try:
        result = cloudinary.uploader.upload(
            to_data_uri(content, mime_type),
            resource_type=resource_type,
            folder=settings.media_folder,
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            timeout=settings.media_upload_timeout,
        )
    except cloudinary.exceptions.Error as exc:
        raise UploadError(f"Cloudinary upload failed: {exc}") from exc

    secure_url = result.get("secure_url") if isinstance(result, dict) else None
    if not secure_url:
        raise UploadError("Cloudinary upload returned no secure_url")
    logger.debug("Uploaded %s to %s", resource_type, secure_url)
    return secure_url
