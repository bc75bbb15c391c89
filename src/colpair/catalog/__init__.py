"""Column catalogs supplied by the host application."""

from .models import Column, DuplicateColumnError
from .catalog import ColumnCatalog, merge_catalogs
from .samples import sample_source_catalog, sample_target_catalog

__all__ = [
    "Column",
    "DuplicateColumnError",
    "ColumnCatalog",
    "merge_catalogs",
    "sample_source_catalog",
    "sample_target_catalog",
]
