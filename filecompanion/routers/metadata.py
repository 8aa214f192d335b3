from fastapi import APIRouter, Depends

from filecompanion.companion import Companion, get_companion
from filecompanion.error import respond_with_error
from filecompanion.models.metadata import FileMetadata

router = APIRouter(tags=["metadata"])


@router.get(
    "/{provider_name}/metadata/{file_id}",
    response_model=FileMetadata,
    response_model_exclude_none=True,
)
def get_file_metadata(file_id: str, companion: Companion = Depends(get_companion)):
    try:
        return companion.provider.get_file_metadata(file_id, companion.provider_user_session)
    except Exception as e:
        response = respond_with_error(e)
        if response is not None:
            return response
        raise
