"""Tests for panes, the pane registry and content adjustment."""

import logging

import pytest

from paneboard.layout.resolver import ResolvedRegion, resolve
from paneboard.layout.templates import Row, Space, Span
from paneboard.panes.base import Pane, adjust_content
from paneboard.panes.registry import PaneRegistry
from paneboard.panes.text import TextPane


class TestAdjustContent:
    """Tests for shrinking panes to their content area."""

    def test_inset_by_one_cell(self) -> None:
        pane = TextPane(Span("source"), 10, 6, 4, 7)
        adjust_content(pane)
        assert (pane.width, pane.height, pane.x, pane.y) == (8, 4, 5, 8)

    def test_tiny_region_goes_negative(self) -> None:
        pane = TextPane(Span("menu"), 1, 1, 0, 0)
        adjust_content(pane)
        assert pane.width == -1
        assert pane.height == -1


class TestTextPane:
    """Tests for the generic text pane."""

    def test_static_lines(self) -> None:
        pane = TextPane(Span("a"), 10, 5, 0, 0, lines=["one", "two"])
        assert pane.render() == ["one", "two"]

    def test_callable_lines_read_on_each_render(self) -> None:
        data = ["first"]
        pane = TextPane(Span("a"), 10, 5, 0, 0, lines=lambda: data)
        assert pane.render() == ["first"]
        data.append("second")
        assert pane.render() == ["first", "second"]

    def test_default_title_from_pane_name(self) -> None:
        assert TextPane(Span("backtrace"), 1, 1, 0, 0).title == "Backtrace"
        assert TextPane(Span("a"), 1, 1, 0, 0, title="Custom").title == "Custom"

    def test_paint_positions_and_fits_lines(self, screen, render) -> None:
        pane = TextPane(Span("a"), 6, 2, 2, 1, lines=["hello world", "hi", "dropped"])
        pane.paint(screen)
        rows = render(screen.getvalue(), 10, 4)
        assert rows[1] == "  hello   "
        assert rows[2] == "  hi      "
        assert rows[3] == " " * 10

    def test_paint_keeps_embedded_newlines_inside_rect(self, screen, render) -> None:
        pane = TextPane(Span("a"), 4, 3, 1, 1, lines=["ab\ncd", "", "dropped"])
        pane.paint(screen)
        rows = render(screen.getvalue(), 6, 5)
        assert rows[1] == " ab   "
        assert rows[2] == " cd   "
        assert rows[3] == "      "
        assert rows[4] == "      "
        assert "\n" not in screen.getvalue()

    def test_paint_with_no_room_writes_nothing(self, screen) -> None:
        for width, height in [(0, 3), (3, 0), (-1, -1)]:
            TextPane(Span("a"), width, height, 0, 0, lines=["x"]).paint(screen)
        assert screen.getvalue() == ""

    def test_factory_binds_content(self) -> None:
        factory = TextPane.factory(["x"], title="T")
        pane = factory(Span("a"), 5, 4, 1, 2)
        assert isinstance(pane, TextPane)
        assert (pane.width, pane.height, pane.x, pane.y) == (5, 4, 1, 2)
        assert pane.render() == ["x"]
        assert pane.title == "T"

    def test_pane_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Pane(Span("a"), 1, 1, 0, 0)


class TestPaneRegistry:
    """Tests for name lookup."""

    @pytest.fixture
    def registry(self) -> PaneRegistry:
        return PaneRegistry({"source": TextPane.factory(["code"])})

    def test_lookup(self, registry) -> None:
        assert registry.lookup("source") is not None
        assert registry.lookup("nope") is None
        assert registry.lookup(None) is None

    def test_create_from_region(self, registry) -> None:
        (region,) = resolve(Span("source"), 30, 10, 5, 6)
        pane = registry.create(region)
        assert pane.template == Span("source")
        assert (pane.width, pane.height, pane.x, pane.y) == (30, 10, 5, 6)

    def test_space_yields_nothing(self, registry) -> None:
        (region,) = resolve(Space(), 5, 5)
        assert registry.create(region) is None

    def test_unknown_name_is_logged_not_raised(self, registry, caplog) -> None:
        region = ResolvedRegion(Span("sorce"), 5, 5, 0, 0)
        with caplog.at_level(logging.DEBUG, logger="paneboard"):
            assert registry.create(region) is None
        assert "sorce" in caplog.text

    def test_register_and_unregister(self, registry) -> None:
        registry.register("menu", TextPane.factory())
        assert "menu" in registry
        assert registry.names() == ["menu", "source"]
        registry.unregister("menu")
        registry.unregister("never-registered")
        assert "menu" not in registry
        assert len(registry) == 1

    def test_rejects_non_callable(self, registry) -> None:
        with pytest.raises(TypeError):
            registry.register("bad", "not a factory")

    def test_missing_names(self, registry) -> None:
        assert registry.missing(["source", "threads", "menu"]) == ["threads", "menu"]

    def test_creates_fresh_instances(self, registry) -> None:
        regions = resolve(Row([Span("source"), Span("source")]), 10, 10)
        first, second = (registry.create(r) for r in regions)
        assert first is not second
        assert first.y == 0 and second.y == 5
