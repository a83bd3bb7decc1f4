from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING
from os import PathLike
from pathlib import Path
from tomllib import load
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = Path("config.toml")


class ConfigError(Exception):
    """Raised when the service cannot start with the configuration it was given."""


class General(BaseModel):
    title: str


class Logging(BaseModel):
    level: int

    @field_validator("level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value
        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(value.upper(), INFO)


class Paths(BaseModel):
    logs: str


class Cors(BaseModel):
    # Any origin is accepted; pin this to the frontend URL in production
    allow_origins: list[str] = ["*"]
    allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    allow_headers: list[str] = ["Content-Type", "Authorization"]


class Network(BaseModel):
    host: str
    port: int
    reload: bool

    cors: Cors = Cors()


class Store(BaseModel):
    backend: Literal["supabase", "sql"] = "supabase"
    table: str = "users"
    database_url: str = "sqlite:///users.db"


class Environment(BaseSettings):
    """Values read from the process environment (and `.env`)."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    app_env: str = "development"
    port: int | None = None

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    general: General
    paths: Paths
    logging: Logging
    network: Network
    store: Store = Store()
    env: Environment = Field(default_factory=Environment)

    @property
    def port(self) -> int:
        return self.env.port or self.network.port

    def check(self) -> "Config":
        """Fail fast when the selected store backend is missing credentials."""
        if self.store.backend == "supabase":
            missing = [
                name
                for name, value in (
                    ("SUPABASE_URL", self.env.supabase_url),
                    ("SUPABASE_ANON_KEY", self.env.supabase_anon_key),
                )
                if not value
            ]
            if missing:
                raise ConfigError(
                    "Supabase credentials are missing: set "
                    + " and ".join(missing)
                    + " in the environment or .env file"
                )
        return self


def load_config(
    shared_config_file: PathLike = DEFAULT_CONFIG_PATH,
    specific_config_file: PathLike | None = None,
) -> Config:
    """Load and merge configurations from TOML files."""
    # Load shared config
    with Path(shared_config_file).open("rb") as f:
        config_data = load(f)

    # Load and merge specific config if provided
    if specific_config_file:
        with Path(specific_config_file).open("rb") as f:
            specific_data = load(f)
            config_data.update(specific_data)

    return Config(**config_data).check()
