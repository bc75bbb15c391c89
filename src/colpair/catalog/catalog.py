"""Read-only, ordered column catalogs."""

import logging
from typing import Iterable, Iterator, Optional

from .models import Column, DuplicateColumnError

logger = logging.getLogger(__name__)


class ColumnCatalog:
    """
    Ordered collection of columns indexed by id.

    Catalogs are supplied by the host application and never mutated by the
    pairing core.
    """

    def __init__(self, columns: Iterable[Column] = ()):
        self._columns: tuple[Column, ...] = tuple(columns)
        self._index: dict[str, Column] = {}
        for column in self._columns:
            if column.id in self._index:
                raise DuplicateColumnError(f"Duplicate column id '{column.id}' in catalog")
            self._index[column.id] = column

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "ColumnCatalog":
        """Build a catalog from plain dicts with id/name/type keys."""
        return cls(Column(**record) for record in records)

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, column_id: object) -> bool:
        return column_id in self._index

    def __repr__(self) -> str:
        return f"ColumnCatalog({[c.id for c in self._columns]!r})"

    @property
    def ids(self) -> list[str]:
        """Column ids in catalog order."""
        return [column.id for column in self._columns]

    def get(self, column_id: str) -> Optional[Column]:
        """Look up a column by id, returning None when absent."""
        return self._index.get(column_id)

    def require(self, column_id: str) -> Column:
        """Look up a column by id, raising KeyError when absent."""
        try:
            return self._index[column_id]
        except KeyError:
            raise KeyError(f"Column '{column_id}' not found in catalog") from None

    def missing(self, column_ids: Iterable[str]) -> list[str]:
        """Return the ids (in input order) that are not in this catalog."""
        return [column_id for column_id in column_ids if column_id not in self._index]

    def excluding(self, column_ids: Iterable[str]) -> list[Column]:
        """Return catalog columns whose id is not in the given ids."""
        excluded = set(column_ids)
        return [column for column in self._columns if column.id not in excluded]


def merge_catalogs(*catalogs: ColumnCatalog) -> ColumnCatalog:
    """
    Merge catalogs in order into one catalog.

    When the same id appears in more than one catalog the first occurrence
    wins.
    """
    merged: dict[str, Column] = {}
    for catalog in catalogs:
        for column in catalog:
            if column.id in merged:
                logger.debug(f"Column '{column.id}' already merged, keeping first occurrence")
                continue
            merged[column.id] = column
    return ColumnCatalog(merged.values())
