import logging
from dataclasses import dataclass, replace
from datetime import date

from gantt.bounds import compute_bounds, midnight
from gantt.geometry import TimelineGeometry, ROW_HEIGHT
from gantt.glyphs import select_glyph, status_color, tooltip_for
from gantt.headers import build_headers
from gantt.state import FILTERS, normalize_items, empty_payload
from gantt.viewport import ViewportController, DEFAULT_VIEWPORT_WIDTH
from gantt.zoom import DEFAULT_ZOOM, get_zoom, zoom_in, zoom_out

LOG = logging.getLogger("gantt")

EMPTY_MESSAGE = "No items with due dates to display"


@dataclass(frozen=True)
class ViewState:
    hovered_id: str | None = None
    filter: str = "all"
    zoom: str = DEFAULT_ZOOM


@dataclass(frozen=True)
class TimelineLayout:
    items: tuple
    bounds: object = None
    geometry: object = None
    headers: object = None
    glyphs: tuple = ()
    today_x: int = 0
    scroll_left: float = 0
    hovered_id: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.items


# ---------- Draw order ----------
GRID, ROW_BACKGROUND, ROW_DIVIDER, TODAY, ITEM = "grid", "row-bg", "row-divider", "today", "item"
LAYERS = (GRID, ROW_BACKGROUND, ROW_DIVIDER, TODAY, ITEM)


def draw_list(layout):
    """
    Yield (layer, payload) in paint order. Items come last so the topmost
    glyph under the pointer is always the one drawn latest.
    """
    if layout.is_empty:
        return
    geometry = layout.geometry
    width = geometry.total_width
    height = geometry.content_height(len(layout.items))

    for band in layout.headers.months:
        yield GRID, {"x": band.x, "y1": 0, "y2": height}
    for i in range(len(layout.items)):
        yield ROW_BACKGROUND, {"x": 0, "y": i * ROW_HEIGHT, "width": width, "height": ROW_HEIGHT, "shaded": i % 2 == 1}
    for i in range(len(layout.items)):
        y = (i + 1) * ROW_HEIGHT
        yield ROW_DIVIDER, {"x1": 0, "x2": width, "y": y}
    yield TODAY, {"x": layout.today_x, "y1": 0, "y2": height}
    for item, glyph in zip(layout.items, layout.glyphs):
        yield ITEM, (item, glyph)


def hit_test(layout, x, y):
    """Topmost item whose glyph contains (x, y), or None."""
    if layout.is_empty:
        return None
    for item, glyph in reversed(list(zip(layout.items, layout.glyphs))):
        if glyph.contains(x, y):
            return item
    return None


# ---------- Controller ----------
class GanttController:
    """
    Owns the interactive state of one timeline view. State only changes
    through dispatch(); every derived value is rebuilt from inputs + state.
    """

    def __init__(self, payload=None, today=None, on_item_click=None, viewport_width=DEFAULT_VIEWPORT_WIDTH):
        self.payload = payload or empty_payload()
        self.today = midnight(today or date.today())
        self.on_item_click = on_item_click
        self.state = ViewState()
        self.viewport = ViewportController(viewport_width)
        self._items_key = None
        self._items = ()
        self._bounds = None
        self.actions = {
            "pointer_enter": self._pointer_enter,
            "pointer_leave": self._pointer_leave,
            "click": self._click,
            "zoom_in": self._zoom_in,
            "zoom_out": self._zoom_out,
            "set_zoom": self._set_zoom,
            "set_filter": self._set_filter,
            "page_left": self._page_left,
            "page_right": self._page_right,
        }

    # ----- inputs -----
    def set_payload(self, payload, today=None):
        self.payload = payload or empty_payload()
        if today is not None:
            self.today = midnight(today)
        self._items_key = None
        self.state = replace(self.state, hovered_id=None)

    def set_viewport_width(self, width):
        if width != self.viewport.viewport_width:
            self.viewport.resize(width)

    # ----- surface -----
    @property
    def zoom(self) -> str:
        return self.state.zoom

    @property
    def filter(self) -> str:
        return self.state.filter

    @property
    def hovered_id(self):
        return self.state.hovered_id

    def dispatch(self, action: str, *args):
        handler = self.actions[action]
        return handler(*args)

    # ----- derivations -----
    def items(self):
        key = (id(self.payload), self.state.filter, self.today)
        if key != self._items_key:
            p = self.payload
            self._items = tuple(normalize_items(
                p.get("project"), p.get("tasks"), p.get("milestones"),
                p.get("rfis"), p.get("submittals"), active_filter=self.state.filter,
            ))
            self._bounds = compute_bounds(self._items, self.today)
            self._items_key = key
        return self._items

    def geometry(self):
        items = self.items()
        if not items:
            return None
        return TimelineGeometry(self._bounds, get_zoom(self.state.zoom))

    def layout(self) -> TimelineLayout:
        items = self.items()
        if not items:
            return TimelineLayout(items=(), hovered_id=self.state.hovered_id)
        geometry = self.geometry()
        rows = len(items)
        glyphs = tuple(
            select_glyph(it, i, geometry, hovered=it.id == self.state.hovered_id, rows=rows)
            for i, it in enumerate(items)
        )
        return TimelineLayout(
            items=items,
            bounds=self._bounds,
            geometry=geometry,
            headers=build_headers(geometry),
            glyphs=glyphs,
            today_x=geometry.today_x,
            scroll_left=self.viewport.sync(geometry),
            hovered_id=self.state.hovered_id,
        )

    def find(self, item_id):
        for it in self.items():
            if it.id == item_id:
                return it
        return None

    def tooltip(self, layout=None):
        layout = layout or self.layout()
        for item, glyph in zip(layout.items, layout.glyphs):
            if item.id == layout.hovered_id:
                return tooltip_for(item, glyph)
        return None

    def label_rows(self, layout=None):
        layout = layout or self.layout()
        return [
            {
                "id": it.id,
                "name": it.name,
                "type": it.type,
                "color": status_color(it.type, it.status),
                "hovered": it.id == layout.hovered_id,
                "clickable": it.source_ref is not None,
            }
            for it in layout.items
        ]

    # ----- action handlers -----
    def _pointer_enter(self, item_id):
        self.state = replace(self.state, hovered_id=item_id)

    def _pointer_leave(self, item_id=None):
        self.state = replace(self.state, hovered_id=None)

    def _click(self, item_id):
        item = self.find(item_id)
        if item is None or item.source_ref is None or self.on_item_click is None:
            return None
        return self.on_item_click(item.type, item.source_ref)

    def _zoom_in(self):
        self.state = replace(self.state, zoom=zoom_in(self.state.zoom))
        return self.state.zoom

    def _zoom_out(self):
        self.state = replace(self.state, zoom=zoom_out(self.state.zoom))
        return self.state.zoom

    def _set_zoom(self, zoom_id):
        self.state = replace(self.state, zoom=get_zoom(zoom_id).id)
        LOG.info("zoom -> %s", zoom_id)
        return self.state.zoom

    def _set_filter(self, active_filter):
        if active_filter not in FILTERS:
            raise ValueError(f"unknown filter: {active_filter!r}")
        if active_filter != self.state.filter:
            self.state = replace(self.state, filter=active_filter, hovered_id=None)
            LOG.info("filter -> %s", active_filter)
        return self.state.filter

    def _page_left(self):
        geometry = self.geometry()
        if geometry is None:
            return 0
        self.viewport.sync(geometry)
        return self.viewport.page_left(geometry)

    def _page_right(self):
        geometry = self.geometry()
        if geometry is None:
            return 0
        self.viewport.sync(geometry)
        return self.viewport.page_right(geometry)
