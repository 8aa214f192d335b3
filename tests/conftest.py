import json

import pytest
from unittest.mock import MagicMock

from googleapiclient.errors import HttpError


# --- Canned Drive API responses ---

THUMBNAIL_URL = "https://drive.google.com/thumbnail?id=file123&sz=w256"

DRIVE_API_IMAGE_FILE = {
    "kind": "drive#file",
    "id": "file123",
    "name": "test-photo.jpg",
    "mimeType": "image/jpeg",
    "size": "1024000",
    "modifiedTime": "2024-01-01T12:00:00.000Z",
    "iconLink": "https://drive-thirdparty.googleusercontent.com/16/type/image/jpeg",
    "thumbnailLink": THUMBNAIL_URL,
    "imageMediaMetadata": {
        "width": 3840,
        "height": 2160,
        "rotation": 0,
        "location": {
            "latitude": 37.7749,
            "longitude": -122.4194,
            "altitude": 10.0,
        },
        "time": "2023-12-25T10:30:00.000Z",
        "cameraMake": "Canon",
        "cameraModel": "EOS R5",
        "exposureTime": 0.005,
        "aperture": 2.8,
        "flashUsed": False,
        "focalLength": 50.0,
        "isoSpeed": 400,
        "meteringMode": "Pattern",
        "sensor": "Full frame",
        "exposureMode": "Auto",
        "colorSpace": "sRGB",
        "whiteBalance": "Auto",
        "exposureBias": 0.0,
        "maxApertureValue": 2.8,
        "subjectDistance": 5,
        "lens": "Canon RF 50mm F1.2L USM",
    },
}

DRIVE_API_VIDEO_FILE = {
    "kind": "drive#file",
    "id": "file123",
    "name": "test-video.mp4",
    "mimeType": "video/mp4",
    "size": "50000000",
    "modifiedTime": "2024-01-01T12:00:00.000Z",
    "videoMediaMetadata": {
        "width": 1920,
        "height": 1080,
        "durationMillis": "120000",  # 2 minutes
    },
}

DRIVE_API_SHORTCUT = {
    "kind": "drive#file",
    "id": "file123",
    "name": "shortcut-to-photo",
    "mimeType": "application/vnd.google-apps.shortcut",
    "shortcutDetails": {
        "targetId": "target-file-123",
        "targetMimeType": "image/jpeg",
    },
}

DRIVE_API_SHORTCUT_TARGET = {
    "kind": "drive#file",
    "id": "target-file-123",
    "name": "actual-photo.jpg",
    "mimeType": "image/jpeg",
    "size": "2048000",
    "imageMediaMetadata": {
        "width": 4000,
        "height": 3000,
    },
}


def make_http_error(status: int, message: str = "error") -> HttpError:
    resp = MagicMock()
    resp.status = status
    resp.reason = "error"
    content = json.dumps({"error": {"code": status, "message": message}}).encode("utf-8")
    return HttpError(resp=resp, content=content)


@pytest.fixture
def mock_drive_build(mocker):
    mock_svc = MagicMock()
    mocker.patch("filecompanion.providers.drive.build", return_value=mock_svc)
    return mock_svc


@pytest.fixture
def mock_drive_service(mock_drive_build):
    """Fully mocked Drive API service."""
    return mock_drive_build


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer test-token"}
