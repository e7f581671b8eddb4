import sys
import os
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

os.environ.setdefault("database_url", "sqlite:///:memory:")

import logging
from types import SimpleNamespace

from app.core.config import Settings
from app.core.errors import UploadError
from app.services.media_uploader import MediaFile, MediaUploader, classify, get_media_uploader


def test_classify_by_declared_mime_type():
    assert classify("image/png") == "image"
    assert classify("image/svg+xml") == "image"
    assert classify("video/mp4") == "video"
    assert classify("application/pdf") == "video"
    assert classify(None) == "video"


def test_upload_keeps_input_order_within_each_kind():
    def host(content, mime_type, resource_type, settings=None):
        return f"https://media.test/{content.decode()}"

    uploader = MediaUploader(upload_fn=host)
    result = uploader.upload([
        MediaFile(b"v1", "video/mp4"),
        MediaFile(b"i1", "image/png"),
        MediaFile(b"v2", "video/webm"),
        MediaFile(b"i2", "image/gif"),
    ])
    assert result.images == ["https://media.test/i1", "https://media.test/i2"]
    assert result.videos == ["https://media.test/v1", "https://media.test/v2"]


def test_failed_uploads_are_logged_and_skipped(caplog):
    def host(content, mime_type, resource_type, settings=None):
        if content == b"bad":
            raise UploadError("rejected")
        return "https://media.test/ok"

    uploader = MediaUploader(upload_fn=host)
    with caplog.at_level(logging.ERROR, logger="app.services.media_uploader"):
        result = uploader.upload([
            MediaFile(b"bad", "image/png", "broken.png"),
            MediaFile(b"good", "image/png", "fine.png"),
        ])

    assert result.images == ["https://media.test/ok"]
    assert result.videos == []
    assert "broken.png" in caplog.text


def test_all_uploads_failing_looks_like_no_media():
    def host(content, mime_type, resource_type, settings=None):
        raise UploadError("down")

    result = MediaUploader(upload_fn=host).upload([MediaFile(b"x", "video/mp4")])
    assert result.images == [] and result.videos == []


def test_dependency_uses_the_application_settings():
    settings = Settings(database_url="sqlite://")
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(settings=settings)))
    assert get_media_uploader(request).settings is settings
