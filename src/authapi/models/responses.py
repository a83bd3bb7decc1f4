from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserOut(BaseModel):
    """A user record as returned to clients. The password hash never leaves."""

    model_config = ConfigDict(extra="ignore")

    id: int | str | None = None
    username: str | None = None
    email: str | None = None
    islogin: bool | None = False
    created_at: datetime | None = None

    @classmethod
    def from_record(cls, record: dict[str, Any] | None) -> "UserOut | None":
        if record is None:
            return None
        return cls.model_validate(record)


class UserResponse(BaseModel):
    message: str
    user: UserOut | None


class MessageResponse(BaseModel):
    message: str


class StatusResponse(BaseModel):
    success: bool
    message: str


class DebugEnvResponse(BaseModel):
    """Whether each store credential is set. The values themselves are never echoed."""

    model_config = ConfigDict(populate_by_name=True)

    supabase_url: str = Field(alias="SUPABASE_URL")
    supabase_anon_key: str = Field(alias="SUPABASE_ANON_KEY")
