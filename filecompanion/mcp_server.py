from fastmcp import FastMCP

from filecompanion.companion import get_provider
from filecompanion.error import error_to_response
from filecompanion.exceptions import ProviderError, ProviderNotFoundError
from filecompanion.models.common import ProviderUserSession

mcp = FastMCP("filecompanion")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, ProviderNotFoundError):
        return {"error": "provider_not_found", "message": str(e)}
    mapped = error_to_response(e)
    if mapped is not None:
        _, body = mapped
        result = {"error": body.error_code, "message": body.message}
        if body.error_code == "auth_error":
            result["action"] = "Obtain a fresh access token for the provider and retry"
        elif body.error_code == "rate_limit":
            result["action"] = "Wait a moment and retry"
        return result
    return {"error": "unknown_error", "message": str(e)}


@mcp.tool
def file_metadata(file_id: str, access_token: str, provider: str = "drive") -> dict:
    """Get metadata for a file stored with a cloud provider (name, type, size, modified time,
    thumbnail, image EXIF details, video dimensions and duration).
    Shortcuts are followed, so the result always describes the target file."""
    try:
        client = get_provider(provider)
        metadata = client.get_file_metadata(file_id, ProviderUserSession(access_token=access_token))
        return metadata.model_dump(by_alias=True, exclude_none=True)
    except (ProviderError, ProviderNotFoundError) as e:
        return _handle_mcp_error(e)
