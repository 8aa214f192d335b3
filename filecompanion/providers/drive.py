import logging

from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from pydantic import ValidationError

from filecompanion.exceptions import AuthenticationError, IntegrationError, NotFoundError, RateLimitError
from filecompanion.models.common import ProviderUserSession
from filecompanion.models.metadata import FileMetadata, ImageMediaMetadata, VideoMediaMetadata
from filecompanion.providers.base import Provider

logger = logging.getLogger(__name__)

DRIVE_FILE_FIELDS = (
    "kind, id, imageMediaMetadata, name, mimeType, ownedByMe, size, modifiedTime, "
    "iconLink, thumbnailLink, teamDriveId, videoMediaMetadata, "
    "shortcutDetails(targetId, targetMimeType)"
)

SHORTCUT_MIME_TYPE = "application/vnd.google-apps.shortcut"

# Drive does not allow shortcuts to shortcuts; the bound only guards against bad data.
MAX_SHORTCUT_HOPS = 5


def _get_drive_service(provider_user_session: ProviderUserSession):
    if not provider_user_session.access_token:
        raise AuthenticationError("Drive session has no access token.")
    creds = Credentials(token=provider_user_session.access_token)
    return build("drive", "v3", credentials=creds)


def _handle_api_error(e: HttpError, file_id: str):
    status = e.resp.status
    if status == 429:
        raise RateLimitError("Drive API rate limit exceeded. Try again shortly.", status_code=status) from e
    if status in (401, 403):
        raise AuthenticationError(f"Drive rejected the session credentials: {e.reason}", status_code=status) from e
    if status == 404:
        raise NotFoundError(f"Drive file {file_id} not found: {e.reason}", status_code=status) from e
    raise IntegrationError(f"Drive API error ({status}): {e.reason}", status_code=status) from e


def _parse_metadata(item: dict) -> FileMetadata:
    image = item.get("imageMediaMetadata")
    video = item.get("videoMediaMetadata")
    return FileMetadata(
        id=item["id"],
        name=item.get("name", ""),
        mime_type=item.get("mimeType", ""),
        size=item.get("size"),
        modified_time=item.get("modifiedTime"),
        icon_link=item.get("iconLink"),
        thumbnail_link=item.get("thumbnailLink"),
        image_media_metadata=ImageMediaMetadata.model_validate(image) if image is not None else None,
        video_media_metadata=VideoMediaMetadata.model_validate(video) if video is not None else None,
    )


class Drive(Provider):
    """Google Drive provider backed by the Drive v3 API."""

    name = "drive"

    def _get_file(self, service, file_id: str) -> dict:
        try:
            return service.files().get(
                fileId=file_id,
                fields=DRIVE_FILE_FIELDS,
                supportsAllDrives=True,
            ).execute()
        except HttpError as e:
            _handle_api_error(e, file_id)
        except RefreshError as e:
            # A bare access token cannot be refreshed, so a 401 from Drive surfaces here.
            raise AuthenticationError(
                "Drive rejected the session credentials: access token expired or revoked.", status_code=401
            ) from e

    def get_file_metadata(self, file_id: str, provider_user_session: ProviderUserSession) -> FileMetadata:
        """Get metadata for a file, following a shortcut to the file it points at."""
        service = _get_drive_service(provider_user_session)
        item = self._get_file(service, file_id)

        hops = 0
        while item.get("mimeType") == SHORTCUT_MIME_TYPE:
            target_id = (item.get("shortcutDetails") or {}).get("targetId")
            if not target_id:
                raise IntegrationError(f"Drive shortcut {item.get('id', file_id)} has no target.")
            hops += 1
            if hops > MAX_SHORTCUT_HOPS:
                raise IntegrationError(f"Too many shortcut hops resolving Drive file {file_id}.")
            logger.debug("Resolving Drive shortcut %s to %s", item.get("id", file_id), target_id)
            item = self._get_file(service, target_id)

        try:
            return _parse_metadata(item)
        except ValidationError as e:
            raise IntegrationError(f"Drive returned unexpected metadata for file {file_id}: {e}") from e
