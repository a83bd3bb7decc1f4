from sqlalchemy import Engine, Table, and_, insert, select, true, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from authapi.core.errors import StoreError
from authapi.models.schema import *  # noqa: F403 # SQLModel subclasses need to be in memory
from authapi.shared import Logger

from .base import Record, RecordStore

logger = Logger(__name__).get_logger()

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class SqlStore(RecordStore):
    """Record store on a local SQL database, using the tables in `models.schema`."""

    def __init__(self, database_url: str):
        kwargs = {}
        if database_url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in IN_MEMORY_URLS:
            # One shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool

        self.engine: Engine = create_engine(database_url, **kwargs)
        SQLModel.metadata.create_all(self.engine)
        logger.info("SQL store ready at %s", self.engine.url)

    def insert(self, table: str, record: Record) -> list[Record]:
        t = self._table(table)
        statement = insert(t).values(**record).returning(*t.c)
        return self._execute(statement)

    def select(self, table: str, where: Record, limit: int | None = None) -> list[Record]:
        t = self._table(table)
        statement = select(t).where(self._where(t, where))
        if limit is not None:
            statement = statement.limit(limit)
        return self._execute(statement)

    def update(self, table: str, values: Record, where: Record) -> list[Record]:
        t = self._table(table)
        statement = (
            update(t).where(self._where(t, where)).values(**values).returning(*t.c)
        )
        return self._execute(statement)

    def _execute(self, statement) -> list[Record]:
        try:
            with self.engine.begin() as connection:
                rows = connection.execute(statement).mappings().all()
        except SQLAlchemyError as e:
            message = str(getattr(e, "orig", None) or e)
            logger.warning("SQL store rejected the statement: %s", message)
            raise StoreError(message) from e

        return [dict(row) for row in rows]

    @staticmethod
    def _table(name: str) -> Table:
        try:
            return SQLModel.metadata.tables[name]
        except KeyError as e:
            raise StoreError(f'relation "{name}" does not exist') from e

    @staticmethod
    def _where(table: Table, where: Record):
        try:
            return and_(
                true(), *(table.c[column] == value for column, value in where.items())
            )
        except KeyError as e:
            raise StoreError(f"column {e.args[0]!r} does not exist") from e
