from .json_body import JsonBody


class RegisterRequest(JsonBody):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(JsonBody):
    email: str | None = None
    password: str | None = None


class LogoutRequest(JsonBody):
    email: str | None = None
