from .config import Config, ConfigError, Environment, load_config
from .logger import Logger

__all__ = ["Config", "ConfigError", "Environment", "Logger", "load_config"]
