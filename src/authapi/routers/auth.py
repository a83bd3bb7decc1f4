from typing import Annotated

from fastapi import APIRouter, Depends

from authapi.core.accounts import AccountService
from authapi.models.requests import LoginRequest, LogoutRequest, RegisterRequest
from authapi.models.responses import MessageResponse, UserOut, UserResponse
from authapi.shared import Logger
from authapi.shared.http import server_error_handler

from .dependencies import get_accounts

logger = Logger(__name__).get_logger()

router = APIRouter()


@router.post("/register", response_model=UserResponse)
def register(
    data: Annotated[RegisterRequest, Depends(RegisterRequest.parse())],
    accounts: Annotated[AccountService, Depends(get_accounts)],
):
    """
    Create a user with `islogin` false.

    400 when a field is missing or the store rejects the insert
    (e.g. the email is already taken).
    """
    logger.debug("Register request for %s", data.email)

    with server_error_handler():
        record = accounts.register(data.username, data.email, data.password)
        user = UserOut.from_record(record)

    return UserResponse(message="✅ User registered successfully!", user=user)


@router.post("/login", response_model=UserResponse)
def login(
    data: Annotated[LoginRequest, Depends(LoginRequest.parse())],
    accounts: Annotated[AccountService, Depends(get_accounts)],
):
    """
    Check the password and set `islogin`.

    Unknown email and wrong password give the same 400 body.
    """
    logger.debug("Login request for %s", data.email)

    with server_error_handler():
        record = accounts.login(data.email, data.password)
        user = UserOut.from_record(record)

    return UserResponse(message="✅ Login successful!", user=user)


@router.post("/logout", response_model=MessageResponse)
def logout(
    data: Annotated[LogoutRequest, Depends(LogoutRequest.parse())],
    accounts: Annotated[AccountService, Depends(get_accounts)],
):
    logger.debug("Logout request for %s", data.email)

    with server_error_handler():
        accounts.logout(data.email)

    return MessageResponse(message="✅ Logout successful!")
