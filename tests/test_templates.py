"""Tests for layout templates and template selection."""

import pytest

from paneboard.errors import LayoutError
from paneboard.layout.presets import DEFAULT_LAYOUTS, NARROW_LAYOUT, PANE_NAMES, WIDE_LAYOUT
from paneboard.layout.templates import Column, LayoutTemplate, Row, Space, Span, iter_leaves, pick_layout


class TestNodes:
    """Tests for Row / Column / Span / Space construction."""

    def test_default_weight(self) -> None:
        assert Span("source").weight == 1
        assert Space().weight == 1
        assert Row([Span("a")]).weight == 1

    @pytest.mark.parametrize("weight", [0, -1, 1.5, True])
    def test_rejects_bad_weight(self, weight) -> None:
        with pytest.raises(LayoutError):
            Span("source", weight=weight)
        with pytest.raises(LayoutError):
            Column([Span("a")], weight=weight)

    def test_rejects_empty_container(self) -> None:
        with pytest.raises(LayoutError):
            Row([])

    def test_rejects_foreign_child(self) -> None:
        with pytest.raises(LayoutError):
            Row(["source"])

    def test_layout_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Space(weight=0)

    def test_children_stored_as_tuple(self) -> None:
        row = Row([Span("a"), Space()])
        assert row.children == (Span("a"), Space())
        assert row.total_weight == 2

    def test_equality_depends_on_kind(self) -> None:
        assert Row([Span("a")]) == Row([Span("a")])
        assert Row([Span("a")]) != Column([Span("a")])

    def test_iter_leaves_depth_first(self) -> None:
        node = Row([Column([Span("a"), Space()]), Span("b")])
        assert list(iter_leaves(node)) == [Span("a"), Space(), Span("b")]


class TestLayoutTemplate:
    """Tests for template thresholds."""

    def test_no_constraints_always_match(self) -> None:
        template = LayoutTemplate(Span("a"))
        assert template.matches(1, 1)
        assert template.matches(0, 0)

    def test_thresholds_are_exclusive(self) -> None:
        template = LayoutTemplate(Span("a"), min_width=80, min_height=24)
        assert template.matches(81, 25)
        assert not template.matches(80, 25)
        assert not template.matches(81, 24)

    def test_pane_names_skip_space(self) -> None:
        template = LayoutTemplate(Column([Span("a"), Space(), Row([Span("b"), Span("c")])]))
        assert template.pane_names() == ["a", "b", "c"]

    def test_rejects_bad_root(self) -> None:
        with pytest.raises(LayoutError):
            LayoutTemplate("source")


class TestPickLayout:
    """Tests for first-match template selection."""

    @pytest.fixture
    def templates(self) -> list[LayoutTemplate]:
        return [
            LayoutTemplate(Span("big"), min_width=80, min_height=24, name="t1"),
            LayoutTemplate(Span("small"), name="t2"),
        ]

    def test_picks_first_match(self, templates) -> None:
        assert pick_layout(templates, 100, 30) is templates[0]

    def test_falls_through_to_general(self, templates) -> None:
        assert pick_layout(templates, 60, 20) is templates[1]

    def test_equal_to_minimum_does_not_qualify(self, templates) -> None:
        assert pick_layout(templates, 80, 24) is templates[1]

    def test_only_one_threshold_met(self, templates) -> None:
        assert pick_layout(templates, 200, 10) is templates[1]

    def test_no_match_returns_first(self) -> None:
        templates = [
            LayoutTemplate(Span("a"), min_width=100, name="first"),
            LayoutTemplate(Span("b"), min_height=50, name="second"),
        ]
        assert pick_layout(templates, 10, 10) is templates[0]

    def test_empty_set_rejected(self) -> None:
        with pytest.raises(LayoutError):
            pick_layout([], 80, 24)


class TestPresets:
    """Tests for the built-in layouts."""

    def test_wide_then_narrow(self) -> None:
        assert DEFAULT_LAYOUTS == (WIDE_LAYOUT, NARROW_LAYOUT)
        assert pick_layout(DEFAULT_LAYOUTS, 160, 50) is WIDE_LAYOUT
        assert pick_layout(DEFAULT_LAYOUTS, 80, 24) is NARROW_LAYOUT

    def test_presets_use_known_panes(self) -> None:
        for template in DEFAULT_LAYOUTS:
            assert set(template.pane_names()) <= set(PANE_NAMES)

    def test_wide_has_every_pane(self) -> None:
        assert sorted(WIDE_LAYOUT.pane_names()) == sorted(PANE_NAMES)
