from postgrest.exceptions import APIError
from supabase import Client, create_client

from authapi.core.errors import StoreError
from authapi.shared import Logger

from .base import Record, RecordStore

logger = Logger(__name__).get_logger()


class SupabaseStore(RecordStore):
    """Record store backed by a hosted Supabase project (PostgREST tables)."""

    def __init__(self, client: Client):
        self.client = client

    @classmethod
    def connect(cls, url: str, key: str) -> "SupabaseStore":
        logger.info("Connecting to Supabase at %s", url)
        return cls(create_client(url, key))

    def insert(self, table: str, record: Record) -> list[Record]:
        logger.debug("Inserting into %s", table)
        query = self.client.table(table).insert(record)
        return self._execute(query)

    def select(self, table: str, where: Record, limit: int | None = None) -> list[Record]:
        logger.debug("Selecting from %s where %s", table, list(where))
        query = self.client.table(table).select("*")
        for column, value in where.items():
            query = query.eq(column, value)
        if limit is not None:
            query = query.limit(limit)
        return self._execute(query)

    def update(self, table: str, values: Record, where: Record) -> list[Record]:
        logger.debug("Updating %s in %s where %s", list(values), table, list(where))
        query = self.client.table(table).update(values)
        for column, value in where.items():
            query = query.eq(column, value)
        return self._execute(query)

    @staticmethod
    def _execute(query) -> list[Record]:
        try:
            response = query.execute()
        except APIError as e:
            logger.warning("Supabase rejected the request: %s (code %s)", e.message, e.code)
            raise StoreError(e.message) from e

        return list(response.data or [])
