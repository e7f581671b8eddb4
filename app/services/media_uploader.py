import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from fastapi import Request

from app.core.config import Settings
from app.core.errors import UploadError
from app.utils.cloudinary_client import upload_to_cloudinary

logger = logging.getLogger(__name__)

# (content, mime_type, resource_type, settings) -> secure_url
UploadFn = Callable[[bytes, str, str, Optional[Settings]], str]


@dataclass
class MediaFile:
    content: bytes
    mime_type: str
    filename: Optional[str] = None


@dataclass
class UploadedMedia:
    images: List[str] = field(default_factory=list)
    videos: List[str] = field(default_factory=list)


def classify(mime_type: Optional[str]) -> str:
    """'image' si el MIME declarado empieza por image; cualquier otro fichero se trata como vídeo."""
    return "image" if (mime_type or "").startswith("image") else "video"


class MediaUploader:
    """Sube ficheros al servicio de media y devuelve sus URLs.

    Política de fallo parcial: si un fichero no se puede subir se registra el
    error y se omite; el lote continúa y la operación nunca falla. Quien llama
    no puede distinguir "sin media" de "media cuyas subidas fallaron todas".
    """

    def __init__(self, settings: Optional[Settings] = None, upload_fn: UploadFn = upload_to_cloudinary):
        self.settings = settings
        self.upload_fn = upload_fn

    def upload(self, files: Sequence[MediaFile]) -> UploadedMedia:
        result = UploadedMedia()
        for media in files:
            resource_type = classify(media.mime_type)
            try:
                url = self.upload_fn(media.content, media.mime_type, resource_type, self.settings)
            except UploadError as exc:
                logger.error("Media upload failed for %s (%s): %s", media.filename, media.mime_type, exc)
                continue
            if resource_type == "image":
                result.images.append(url)
            else:
                result.videos.append(url)
        return result


def get_media_uploader(request: Request) -> MediaUploader:
    return MediaUploader(request.app.state.settings)
