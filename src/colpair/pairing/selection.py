"""Ordered selection of column ids for one side of a pending pairing."""

import logging
from typing import Callable, Iterable, Iterator, Optional

from ..catalog import Column, ColumnCatalog
from ..config import settings
from .models import StaleReferenceError

logger = logging.getLogger(__name__)


class SelectionTracker:
    """
    Ordered set of selected column ids.

    Backed by an insertion-ordered dict so membership checks and toggles do
    not scan the sequence.
    """

    def __init__(
        self,
        catalog: ColumnCatalog,
        consumed: Optional[Callable[[], Iterable[str]]] = None,
        name: str = "selection",
        strict: Optional[bool] = None,
    ):
        """
        Initialize the tracker.

        Args:
            catalog: Columns this side may select from
            consumed: Returns the ids already used on this side by committed
                pairs; read on every call to available()
            name: Label used in log messages and errors
            strict: Raise on stale references (defaults to settings)
        """
        self.catalog = catalog
        self.name = name
        self._consumed = consumed or (lambda: ())
        self._strict = settings.strict_references if strict is None else strict
        self._items: dict[str, None] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, column_id: object) -> bool:
        return column_id in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"SelectionTracker({self.name!r}, {self.ids!r})"

    @property
    def ids(self) -> list[str]:
        """Selected ids in selection order."""
        return list(self._items)

    def toggle(self, column_id: str) -> list[str]:
        """
        Remove the id if selected, otherwise append it.

        Returns:
            The new selection order
        """
        if column_id in self._items:
            del self._items[column_id]
            logger.debug(f"{self.name}: deselected '{column_id}'")
        else:
            self._items[column_id] = None
            logger.debug(f"{self.name}: selected '{column_id}'")
        return self.ids

    def reorder(self, from_id: str, to_id: str) -> bool:
        """
        Move from_id to the position currently held by to_id.

        The element is removed and reinserted; all other elements keep their
        relative order.

        Returns:
            True if the selection changed
        """
        if from_id == to_id:
            return False

        items = self.ids
        for reference in (from_id, to_id):
            if reference not in self._items:
                self._stale(reference)
                return False

        old_index = items.index(from_id)
        new_index = items.index(to_id)
        items.insert(new_index, items.pop(old_index))
        self._items = dict.fromkeys(items)
        logger.debug(f"{self.name}: moved '{from_id}' to position {new_index}")
        return True

    def reset(self, column_ids: Iterable[str] = ()) -> None:
        """Replace the selection wholesale. Repeated ids keep their first position."""
        self._items = dict.fromkeys(column_ids)

    def clear(self) -> None:
        self._items.clear()

    def columns(self) -> list[Column]:
        """Resolve the selected ids against the catalog, in selection order."""
        return [self.catalog.get(column_id) for column_id in self._items if column_id in self.catalog]

    def available(self) -> list[Column]:
        """Catalog columns not already used on this side by committed pairs."""
        return self.catalog.excluding(self._consumed())

    def _stale(self, reference: str) -> None:
        if self._strict:
            raise StaleReferenceError(reference, f"{self.name} selection")
        logger.warning(f"{self.name}: ignoring reorder with stale id '{reference}'")
