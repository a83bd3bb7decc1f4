from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

__all__ = [
    "ApiError",
    "AuthError",
    "StoreError",
    "UnexpectedError",
    "ValidationError",
    "install_error_handlers",
]


class ApiError(Exception):
    """Base of every error a handler reports to the client as `{"error": ...}`."""

    status_code: int = 400
    default_message: str = "Bad Request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """The client omitted a required field or sent a malformed body."""

    status_code = 400
    default_message = "Invalid request body"


class AuthError(ApiError):
    """Unknown user or wrong password. Both read the same to the client."""

    status_code = 400
    default_message = "Invalid credentials"

    def __init__(self):
        super().__init__(self.default_message)


class StoreError(ApiError):
    """The record store reported a failure, e.g. a constraint violation."""

    status_code = 400
    default_message = "Record store error"


class UnexpectedError(ApiError):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self):
        super().__init__(self.default_message)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def install_error_handlers(app: FastAPI):
    app.add_exception_handler(ApiError, api_error_handler)
