from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    Local mirror of the hosted `users` table.

    Only the SQL store creates this table; the hosted store owns its own schema.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(..., description="Display name chosen at registration")
    email: str = Field(..., unique=True, index=True, description="Login key")
    password: str = Field(..., description="Salted scrypt hash of the password")
    islogin: bool = Field(default=False, description="Set on login, cleared on logout")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp of registration",
    )
