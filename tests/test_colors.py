"""Tests for positional color assignment."""

import pytest

from colpair.catalog import Column
from colpair.pairing import Pair, MAPPING_PALETTE, color_index, color_name, assign_colors


def _pair(pair_id: str, color: int = 7) -> Pair:
    column = Column(id=pair_id, name=pair_id)
    return Pair(id=pair_id, left=column, right=column, color_index=color)


class TestColorIndex:
    """Tests for color_index."""

    def test_color_index_cycles(self):
        assert [color_index(i, 10) for i in (0, 1, 9, 10, 23)] == [0, 1, 9, 0, 3]

    def test_color_index_custom_palette(self):
        assert color_index(5, 3) == 2

    def test_color_index_invalid_palette(self):
        with pytest.raises(ValueError):
            color_index(0, 0)

    def test_color_index_negative_position(self):
        with pytest.raises(ValueError):
            color_index(-1, 10)


class TestColorName:
    """Tests for the reference palette."""

    def test_palette_has_ten_slots(self):
        assert len(MAPPING_PALETTE) == 10

    def test_color_name(self):
        assert color_name(0) == "blue"
        assert color_name(9) == "rose"
        assert color_name(10) == "blue"


class TestAssignColors:
    """Tests for assign_colors."""

    def test_assign_colors_by_position(self):
        pairs = [_pair("a"), _pair("b"), _pair("c")]

        recolored = assign_colors(pairs, 10)

        assert [p.color_index for p in recolored] == [0, 1, 2]
        assert [p.id for p in recolored] == ["a", "b", "c"]

    def test_assign_colors_does_not_mutate_input(self):
        pairs = [_pair("a", color=5)]
        assign_colors(pairs, 10)
        assert pairs[0].color_index == 5
