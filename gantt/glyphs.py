import logging
from dataclasses import dataclass

from gantt.state import TASK, MILESTONE, RFI, SUBMITTAL, PROJECT_DATE

LOG = logging.getLogger("gantt")

# ---------- Palette ----------
GREEN = "#22c55e"
BLUE = "#3b82f6"
RED = "#ef4444"
GRAY = "#64748b"
AMBER = "#f59e0b"
LIME = "#84cc16"
PURPLE = "#8b5cf6"

ITEM_COLORS = {
    TASK: GREEN,
    MILESTONE: AMBER,
    RFI: BLUE,
    SUBMITTAL: PURPLE,
    PROJECT_DATE: RED,
}

# (status -> color, fallback)
STATUS_COLORS = {
    TASK: ({"Completed": GREEN, "In Progress": BLUE, "Blocked": RED}, GRAY),
    RFI: ({"Answered": GREEN, "Open": AMBER, "Draft": GRAY}, BLUE),
    SUBMITTAL: ({
        "Approved": GREEN,
        "Approved as Noted": LIME,
        "Revise and Resubmit": AMBER,
        "Rejected": RED,
    }, PURPLE),
}

LEGEND = (
    ("Task", TASK, "☑️"),
    ("Milestone", MILESTONE, "🚩"),
    ("RFI", RFI, "📄"),
    ("Submittal", SUBMITTAL, "📋"),
)

ICONS = {
    TASK: "☑️",
    MILESTONE: "🚩",
    RFI: "📄",
    SUBMITTAL: "📋",
    PROJECT_DATE: "🏭",
}
SUB_TYPE_ICONS = {"delivery": "🚚"}

BAR_HEIGHT = 20
DIAMOND_SIZE, DIAMOND_SIZE_HOVER = 8, 10
MARKER_RADIUS, MARKER_RADIUS_HOVER = 6, 8
CAP_RADIUS, CAP_RADIUS_HOVER = 5, 6


def status_color(item_type: str, status) -> str:
    if item_type == PROJECT_DATE:
        return RED
    if item_type in STATUS_COLORS:
        table, fallback = STATUS_COLORS[item_type]
        return table.get(status, fallback)
    return ITEM_COLORS.get(item_type, GRAY)


def icon_for(item) -> str:
    return SUB_TYPE_ICONS.get(item.sub_type) or ICONS.get(item.type, "•")


def _in_circle(px, py, cx, cy, r) -> bool:
    return (px - cx) ** 2 + (py - cy) ** 2 <= r * r


# ---------- Glyph variants ----------
@dataclass(frozen=True)
class DurationBar:
    item_id: str
    x: int
    y: float          # row centre
    width: int
    color: str
    hovered: bool = False

    height = BAR_HEIGHT

    @property
    def top(self) -> float:
        return self.y - BAR_HEIGHT / 2

    @property
    def cap(self):
        return self.x + self.width, self.y, CAP_RADIUS_HOVER if self.hovered else CAP_RADIUS

    @property
    def anchor(self):
        return self.x + self.width / 2, self.top

    def contains(self, px, py) -> bool:
        if self.x <= px <= self.x + self.width and self.top <= py <= self.top + BAR_HEIGHT:
            return True
        return _in_circle(px, py, *self.cap)


@dataclass(frozen=True)
class Diamond:
    item_id: str
    x: int
    y: float
    color: str
    hovered: bool = False

    @property
    def size(self) -> int:
        return DIAMOND_SIZE_HOVER if self.hovered else DIAMOND_SIZE

    @property
    def points(self):
        s = self.size
        return ((self.x, self.y - s), (self.x + s, self.y), (self.x, self.y + s), (self.x - s, self.y))

    @property
    def anchor(self):
        return self.x, self.y - self.size

    def contains(self, px, py) -> bool:
        return abs(px - self.x) + abs(py - self.y) <= self.size


@dataclass(frozen=True)
class CircleMarker:
    item_id: str
    x: int
    y: float
    color: str
    hovered: bool = False

    @property
    def radius(self) -> int:
        return MARKER_RADIUS_HOVER if self.hovered else MARKER_RADIUS

    @property
    def anchor(self):
        return self.x, self.y - MARKER_RADIUS_HOVER

    def contains(self, px, py) -> bool:
        return _in_circle(px, py, self.x, self.y, self.radius)


@dataclass(frozen=True)
class GuideLine:
    """Dashed line over the whole row stack; only its marker is interactive."""
    item_id: str
    x: int
    y: float
    height: int       # full content height
    color: str
    hovered: bool = False

    @property
    def marker(self) -> CircleMarker:
        return CircleMarker(self.item_id, self.x, self.y, self.color, self.hovered)

    @property
    def anchor(self):
        return self.marker.anchor

    def contains(self, px, py) -> bool:
        return self.marker.contains(px, py)


# ---------- Dispatch ----------
BAR, DIAMOND, GUIDE, CIRCLE = "bar", "diamond", "guide", "circle"

_warned_types = set()


def glyph_kind(item) -> str:
    if item.type == TASK and item.start_date is not None:
        return BAR
    if item.type == MILESTONE:
        return DIAMOND
    if item.type == PROJECT_DATE:
        return GUIDE
    if item.type not in (TASK, RFI, SUBMITTAL) and item.type not in _warned_types:
        _warned_types.add(item.type)
        LOG.debug("no glyph for item type %r; drawing a circle marker", item.type)
    return CIRCLE


def _bar(item, geometry, y, color, hovered, rows):
    x, width = geometry.bar_span(item.start_date, item.date)
    return DurationBar(item.id, x, y, width, color, hovered)


def _diamond(item, geometry, y, color, hovered, rows):
    return Diamond(item.id, geometry.position(item.date), y, color, hovered)


def _guide(item, geometry, y, color, hovered, rows):
    return GuideLine(item.id, geometry.position(item.date), y, geometry.content_height(rows), color, hovered)


def _circle(item, geometry, y, color, hovered, rows):
    return CircleMarker(item.id, geometry.position(item.date), y, color, hovered)


BUILDERS = {BAR: _bar, DIAMOND: _diamond, GUIDE: _guide, CIRCLE: _circle}


def select_glyph(item, index: int, geometry, hovered: bool = False, rows: int = 1):
    kind = glyph_kind(item)
    color = status_color(item.type, item.status)
    return BUILDERS[kind](item, geometry, geometry.row_y(index), color, hovered, rows)


# ---------- Tooltip ----------
def format_long_date(d) -> str:
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def tooltip_for(item, glyph) -> dict:
    x, y = glyph.anchor
    return {
        "name": item.name,
        "date": format_long_date(item.date),
        "status": item.status,
        "status_color": status_color(item.type, item.status) if item.status else None,
        "x": x,
        "y": y,
    }
