"""Configuration session holding the mapping and key/validation relations."""

import logging
from typing import Iterable, Optional, Union

from pydantic import BaseModel

from ..catalog import Column, ColumnCatalog, merge_catalogs
from ..config import settings
from ..modes import PairingMode
from .relation import (
    Relation,
    RelationKind,
    PairsListener,
    MAPPING_PROFILE,
    KEY_VALIDATION_PROFILE,
)

logger = logging.getLogger(__name__)

CatalogLike = Union[ColumnCatalog, Iterable[Union[Column, dict]]]


class SessionSummary(BaseModel):
    """Pair counts and modes of both relations."""

    mapping_count: int
    mapping_mode: PairingMode
    key_validation_count: int
    key_validation_mode: PairingMode


def _as_catalog(columns: CatalogLike) -> ColumnCatalog:
    if isinstance(columns, ColumnCatalog):
        return columns
    return ColumnCatalog(
        column if isinstance(column, Column) else Column(**column) for column in columns
    )


class ConfigurationSession:
    """
    One transient editing session over a source and a target catalog.

    The mapping relation pairs source columns with target columns. The
    key/validation relation pairs columns drawn from both catalogs. The two
    relations share no state.
    """

    def __init__(
        self,
        source_columns: CatalogLike = (),
        target_columns: CatalogLike = (),
        on_mapping_change: Optional[PairsListener] = None,
        on_key_validation_change: Optional[PairsListener] = None,
        palette_size: Optional[int] = None,
        strict: Optional[bool] = None,
    ):
        self.source = _as_catalog(source_columns)
        self.target = _as_catalog(target_columns)
        self.all_columns = merge_catalogs(self.source, self.target)

        self.mapping = Relation(
            MAPPING_PROFILE,
            self.source,
            self.target,
            mode=PairingMode(settings.mapping_default_mode),
            self_catalog=self.all_columns,
            palette_size=palette_size,
            strict=strict,
        )
        self.key_validation = Relation(
            KEY_VALIDATION_PROFILE,
            self.all_columns,
            self.all_columns,
            mode=PairingMode(settings.key_validation_default_mode),
            self_catalog=self.all_columns,
            palette_size=palette_size,
            strict=strict,
        )

        if on_mapping_change is not None:
            self.mapping.subscribe(on_mapping_change)
        if on_key_validation_change is not None:
            self.key_validation.subscribe(on_key_validation_change)

        logger.info(
            f"Session started with {len(self.source)} source and "
            f"{len(self.target)} target columns"
        )

    def relation(self, kind: RelationKind) -> Relation:
        kind = RelationKind(kind)
        if kind == RelationKind.MAPPING:
            return self.mapping
        return self.key_validation

    def summary(self) -> SessionSummary:
        return SessionSummary(
            mapping_count=len(self.mapping.pairs),
            mapping_mode=self.mapping.mode,
            key_validation_count=len(self.key_validation.pairs),
            key_validation_mode=self.key_validation.mode,
        )
