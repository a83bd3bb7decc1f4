from .accounts import LoginRequest, LogoutRequest, RegisterRequest
from .json_body import JsonBody

__all__ = [
    "JsonBody",
    "LoginRequest",
    "LogoutRequest",
    "RegisterRequest",
]
