"""
Tests for glyph selection, status colors, hit areas and tooltips.
"""

from datetime import date

import pytest

from gantt.glyphs import (
    AMBER, BLUE, GRAY, GREEN, LIME, PURPLE, RED,
    CircleMarker, Diamond, DurationBar, GuideLine,
    glyph_kind, select_glyph, status_color, tooltip_for,
)
from gantt.state import TimelineItem


def _item(item_type, d=date(2025, 2, 10), start=None, status=None, **kw):
    return TimelineItem(id=f"{item_type}-1", type=item_type, name="Thing", date=d, start_date=start, status=status, **kw)


class TestStatusColor:
    @pytest.mark.parametrize("status, color", [
        ("Completed", GREEN), ("In Progress", BLUE), ("Blocked", RED), ("Not Started", GRAY), (None, GRAY),
    ])
    def test_task(self, status, color):
        assert status_color("task", status) == color

    @pytest.mark.parametrize("status, color", [
        ("Answered", GREEN), ("Open", AMBER), ("Draft", GRAY), ("Closed", BLUE),
    ])
    def test_rfi(self, status, color):
        assert status_color("rfi", status) == color

    @pytest.mark.parametrize("status, color", [
        ("Approved", GREEN), ("Approved as Noted", LIME), ("Revise and Resubmit", AMBER),
        ("Rejected", RED), ("Pending", PURPLE),
    ])
    def test_submittal(self, status, color):
        assert status_color("submittal", status) == color

    def test_project_date_always_red(self):
        assert status_color("projectDate", "Completed") == RED

    def test_milestone_uses_type_color(self):
        assert status_color("milestone", "Completed") == AMBER


class TestSelectGlyph:
    def test_task_with_start_is_bar(self, month_geometry):
        g = select_glyph(_item("task", start=date(2025, 2, 1), status="In Progress"), 2, month_geometry)
        assert isinstance(g, DurationBar)
        assert g.x == 31 * 24
        assert g.width == 216
        assert g.y == 2 * 36 + 18
        assert g.top == g.y - 10
        assert g.cap == (g.x + 216, g.y, 5)
        assert g.color == BLUE

    def test_same_day_task_gets_min_width(self, month_geometry):
        g = select_glyph(_item("task", start=date(2025, 2, 10)), 0, month_geometry)
        assert g.width == 8

    def test_task_without_start_is_circle(self, month_geometry):
        assert isinstance(select_glyph(_item("task"), 0, month_geometry), CircleMarker)

    def test_milestone_is_diamond(self, month_geometry):
        g = select_glyph(_item("milestone"), 1, month_geometry)
        assert isinstance(g, Diamond)
        x, y = month_geometry.position(date(2025, 2, 10)), 54
        assert g.points == ((x, y - 8), (x + 8, y), (x, y + 8), (x - 8, y))

    def test_hovered_diamond_grows(self, month_geometry):
        g = select_glyph(_item("milestone"), 0, month_geometry, hovered=True)
        assert g.size == 10

    def test_project_date_is_guide_line(self, month_geometry):
        g = select_glyph(_item("projectDate", sub_type="delivery"), 1, month_geometry, rows=4)
        assert isinstance(g, GuideLine)
        assert g.height == 4 * 36
        assert g.marker.radius == 6
        assert g.color == RED

    @pytest.mark.parametrize("item_type", ["rfi", "submittal", "punchItem"])
    def test_everything_else_is_circle(self, month_geometry, item_type):
        g = select_glyph(_item(item_type), 0, month_geometry)
        assert isinstance(g, CircleMarker)
        assert g.radius == 6
        assert select_glyph(_item(item_type), 0, month_geometry, hovered=True).radius == 8

    def test_kinds_are_exclusive(self):
        assert glyph_kind(_item("task", start=date(2025, 2, 1))) == "bar"
        assert glyph_kind(_item("milestone", start=date(2025, 2, 1))) == "diamond"
        assert glyph_kind(_item("projectDate")) == "guide"
        assert glyph_kind(_item("rfi")) == "circle"


class TestContains:
    def test_bar_body_and_cap(self):
        bar = DurationBar("t", 100, 18, 50, GREEN)
        assert bar.contains(120, 18)
        assert bar.contains(154, 18)         # inside end cap
        assert not bar.contains(120, 40)
        assert not bar.contains(90, 18)

    def test_diamond(self):
        d = Diamond("m", 100, 18, AMBER)
        assert d.contains(104, 21)
        assert not d.contains(106, 24)

    def test_guide_line_only_marker(self):
        g = GuideLine("p", 100, 54, 200, RED)
        assert g.contains(100, 54)
        assert not g.contains(100, 10)


class TestTooltip:
    def test_fields(self, month_geometry):
        item = _item("rfi", status="Open")
        tip = tooltip_for(item, select_glyph(item, 0, month_geometry))
        assert tip["name"] == "Thing"
        assert tip["date"] == "Feb 10, 2025"
        assert tip["status"] == "Open"
        assert tip["status_color"] == AMBER
        assert tip["y"] == 18 - 8

    def test_bar_anchor_is_middle_of_top(self, month_geometry):
        item = _item("task", start=date(2025, 2, 1))
        glyph = select_glyph(item, 0, month_geometry)
        tip = tooltip_for(item, glyph)
        assert (tip["x"], tip["y"]) == (glyph.x + 108, 8)

    def test_no_status(self, month_geometry):
        item = _item("projectDate")
        tip = tooltip_for(item, select_glyph(item, 0, month_geometry))
        assert tip["status"] is None
        assert tip["status_color"] is None
