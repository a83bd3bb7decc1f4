from abc import ABC, abstractmethod
from typing import Any

type Record = dict[str, Any]


class RecordStore(ABC):
    """
    Table-keyed persistence used by the account service.

    Predicates are column equality checks joined with AND. Every operation
    returns the rows the store reports back, as plain dicts. A failure the
    store itself reports is raised as `StoreError`; transport failures
    propagate as whatever the client library raises.
    """

    @abstractmethod
    def insert(self, table: str, record: Record) -> list[Record]: ...

    @abstractmethod
    def select(
        self, table: str, where: Record, limit: int | None = None
    ) -> list[Record]: ...

    @abstractmethod
    def update(self, table: str, values: Record, where: Record) -> list[Record]: ...

    def ping(self, table: str) -> list[Record]:
        """Fetch at most one row, to check the store is reachable."""
        return self.select(table, {}, limit=1)
