import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.routing import Mount

from filecompanion.companion import PROVIDERS
from filecompanion.config import get_settings
from filecompanion.error import respond_with_error
from filecompanion.exceptions import ProviderError, ProviderNotFoundError
from filecompanion.mcp_server import mcp
from filecompanion.models.common import StatusResponse
from filecompanion.routers.metadata import router as metadata_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# --- FastAPI app ---

api = FastAPI(title="filecompanion", version="0.1.0")


@api.get("/api/status")
def api_status() -> StatusResponse:
    return StatusResponse(providers=sorted(PROVIDERS))


api.include_router(metadata_router)


# --- Exception handlers ---

@api.exception_handler(ProviderError)
async def provider_error_handler(request: Request, exc: ProviderError):
    response = respond_with_error(exc)
    if response is not None:
        return response
    return JSONResponse(status_code=500, content={"error_code": "integration_error", "message": str(exc)})


@api.exception_handler(ProviderNotFoundError)
async def provider_not_found_handler(request: Request, exc: ProviderNotFoundError):
    return JSONResponse(status_code=404, content={"error_code": "provider_not_found", "message": str(exc)})


@api.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error_code": "internal_error", "message": "Internal server error"})


# --- Starlette root app ---

def create_app() -> Starlette:
    if not get_settings().mcp_enabled:
        return Starlette(routes=[Mount("/", app=api)])
    mcp_app = mcp.http_app(path="/", stateless_http=True)
    return Starlette(
        routes=[
            Mount("/mcp", app=mcp_app),
            Mount("/", app=api),
        ],
        lifespan=mcp_app.lifespan,
    )


app = create_app()


def run():
    settings = get_settings()
    configure_logging()
    uvicorn.run(
        "filecompanion.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
