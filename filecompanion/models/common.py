from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error_code: str
    message: str


class ProviderUserSession(BaseModel):
    access_token: str


class StatusResponse(BaseModel):
    providers: list[str]
