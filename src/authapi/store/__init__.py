from authapi.shared import Config, Logger

from .base import Record, RecordStore
from .sql_store import SqlStore
from .supabase_store import SupabaseStore

__all__ = ["Record", "RecordStore", "SqlStore", "SupabaseStore", "create_store"]

logger = Logger(__name__).get_logger()


def create_store(config: Config) -> RecordStore:
    """Build the record store selected by `[store] backend`."""
    logger.debug("Creating %s record store", config.store.backend)

    if config.store.backend == "sql":
        return SqlStore(config.store.database_url)

    return SupabaseStore.connect(config.env.supabase_url, config.env.supabase_anon_key)
