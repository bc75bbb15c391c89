"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from colpair.catalog import Column, ColumnCatalog, merge_catalogs
from colpair.modes import PairingMode
from colpair.pairing import (
    PairingEngine,
    Relation,
    ConfigurationSession,
    MAPPING_PROFILE,
    KEY_VALIDATION_PROFILE,
)


@pytest.fixture
def source_catalog() -> ColumnCatalog:
    """Three source columns."""
    return ColumnCatalog(
        [
            Column(id="s1", name="customer_id", type="INTEGER"),
            Column(id="s2", name="first_name", type="VARCHAR"),
            Column(id="s3", name="email_address", type="VARCHAR"),
        ]
    )


@pytest.fixture
def target_catalog() -> ColumnCatalog:
    """Three target columns."""
    return ColumnCatalog(
        [
            Column(id="t1", name="id", type="INTEGER"),
            Column(id="t2", name="full_name", type="VARCHAR"),
            Column(id="t3", name="email"),
        ]
    )


@pytest.fixture
def engine(source_catalog, target_catalog) -> PairingEngine:
    """Colored bulk-positional engine over the test catalogs."""
    return PairingEngine(source_catalog, target_catalog, palette_size=10, strict=False)


@pytest.fixture
def self_paired_engine(source_catalog, target_catalog) -> PairingEngine:
    """Engine starting in self-paired mode."""
    return PairingEngine(
        source_catalog,
        target_catalog,
        mode=PairingMode.SELF_PAIRED,
        palette_size=10,
        strict=False,
    )


@pytest.fixture
def listener() -> Mock:
    """Mocked change listener."""
    return Mock()


@pytest.fixture
def mapping(source_catalog, target_catalog, listener) -> Relation:
    """Mapping relation with a subscribed listener."""
    relation = Relation(
        MAPPING_PROFILE, source_catalog, target_catalog, palette_size=10, strict=False
    )
    relation.subscribe(listener)
    return relation


@pytest.fixture
def key_validation(source_catalog, target_catalog) -> Relation:
    """Key/validation relation over the merged catalog."""
    merged = merge_catalogs(source_catalog, target_catalog)
    return Relation(KEY_VALIDATION_PROFILE, merged, merged, self_catalog=merged, strict=False)


@pytest.fixture
def session(source_catalog, target_catalog) -> ConfigurationSession:
    """Session with mocked change sinks."""
    return ConfigurationSession(
        source_catalog,
        target_catalog,
        on_mapping_change=Mock(),
        on_key_validation_change=Mock(),
        palette_size=10,
        strict=False,
    )
