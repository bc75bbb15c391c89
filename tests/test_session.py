"""Tests for the configuration session."""

from unittest.mock import Mock

from colpair.catalog import Column
from colpair.modes import PairingMode
from colpair.pairing import ConfigurationSession, RelationKind, Side


class TestConfigurationSession:
    """Tests for ConfigurationSession."""

    def test_relations_use_expected_catalogs(self, session):
        assert session.mapping.left.catalog.ids == ["s1", "s2", "s3"]
        assert session.mapping.right.catalog.ids == ["t1", "t2", "t3"]
        assert session.key_validation.left.catalog.ids == ["s1", "s2", "s3", "t1", "t2", "t3"]
        assert session.key_validation.right.catalog.ids == session.all_columns.ids

    def test_relation_lookup(self, session):
        assert session.relation(RelationKind.MAPPING) is session.mapping
        assert session.relation("key_validation") is session.key_validation

    def test_accepts_plain_records(self):
        session = ConfigurationSession(
            [{"id": "a", "name": "alpha"}],
            [Column(id="b", name="beta")],
        )
        assert session.all_columns.ids == ["a", "b"]

    def test_relations_are_independent(self, session):
        session.mapping.toggle_selection(Side.LEFT, "s1")
        session.mapping.toggle_selection(Side.RIGHT, "t1")
        session.mapping.commit()

        assert session.key_validation.pairs == ()
        assert session.key_validation.left.ids == []

    def test_change_sinks(self):
        on_mapping_change = Mock()
        on_key_validation_change = Mock()
        session = ConfigurationSession(
            [Column(id="s1", name="a")],
            [Column(id="t1", name="b")],
            on_mapping_change=on_mapping_change,
            on_key_validation_change=on_key_validation_change,
            palette_size=10,
            strict=False,
        )

        session.mapping.add_pair("s1", "t1")
        session.key_validation.add_pair("t1", "s1")

        on_mapping_change.assert_called_once_with(session.mapping.pairs)
        on_key_validation_change.assert_called_once_with(session.key_validation.pairs)

    def test_summary(self, session):
        session.mapping.add_pair("s1", "t1")
        session.key_validation.request_mode_change(PairingMode.SELF_PAIRED)
        session.key_validation.toggle_selection(Side.LEFT, "s2")
        session.key_validation.toggle_selection(Side.LEFT, "t3")

        summary = session.summary()

        assert summary.mapping_count == 1
        assert summary.key_validation_count == 2
        assert summary.key_validation_mode == PairingMode.SELF_PAIRED


class TestEndToEnd:
    """End-to-end mapping scenario."""

    def test_commit_remove_reorder(self):
        session = ConfigurationSession(
            [Column(id="s1", name="s1"), Column(id="s2", name="s2")],
            [Column(id="t1", name="t1"), Column(id="t2", name="t2")],
            palette_size=10,
            strict=False,
        )
        mapping = session.mapping

        for column_id in ("s1", "s2"):
            mapping.toggle_selection(Side.LEFT, column_id)
        for column_id in ("t2", "t1"):
            mapping.toggle_selection(Side.RIGHT, column_id)
        mapping.commit()

        assert [(p.left.id, p.right.id, p.color_index) for p in mapping.pairs] == [
            ("s1", "t2", 0),
            ("s2", "t1", 1),
        ]

        mapping.remove(mapping.pairs[0].id)
        assert [(p.left.id, p.right.id, p.color_index) for p in mapping.pairs] == [
            ("s2", "t1", 1),
        ]

        before = mapping.pairs
        assert mapping.reorder([p.id for p in before]) is False
        assert mapping.pairs == before
