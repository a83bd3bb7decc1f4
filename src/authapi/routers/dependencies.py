from fastapi import Request

from authapi.core.accounts import AccountService
from authapi.shared import Config


def get_config(request: Request) -> Config:
    return request.app.state.config


def get_accounts(request: Request) -> AccountService:
    return request.app.state.accounts
