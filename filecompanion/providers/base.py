from abc import ABC

from filecompanion.models.common import ProviderUserSession
from filecompanion.models.metadata import FileMetadata


class Provider(ABC):
    """
    Base class for a cloud storage provider.
    Each backend (e.g. Google Drive) subclasses this and implements the
    operations it supports, returning provider-neutral models.
    """

    name: str = ""

    def get_file_metadata(self, file_id: str, provider_user_session: ProviderUserSession) -> FileMetadata:
        """
        Fetches metadata for a single file.

        :param file_id: The provider's ID of the file.
        :param provider_user_session: The caller's session with the provider.
        :return: The normalized FileMetadata for the file.
        """
        raise NotImplementedError(f"{type(self).__name__} does not support file metadata")
