from gantt.bounds import days_between

ROW_HEIGHT = 36
HEADER_HEIGHT = 50
LABEL_WIDTH = 280
MIN_BAR_WIDTH = 8


class TimelineGeometry:
    """Date -> x and row index -> y for one (bounds, zoom) pair. Pure."""

    def __init__(self, bounds, zoom):
        self.bounds = bounds
        self.zoom = zoom
        self.day_width = zoom.day_width

    @property
    def total_days(self) -> int:
        return days_between(self.bounds.start, self.bounds.end)

    @property
    def total_width(self) -> int:
        return self.total_days * self.day_width

    @property
    def today_x(self) -> int:
        return self.position(self.bounds.today)

    def position(self, d) -> int:
        return days_between(self.bounds.start, d) * self.day_width

    def row_y(self, index: int) -> float:
        return index * ROW_HEIGHT + ROW_HEIGHT / 2

    def content_height(self, rows: int) -> int:
        return rows * ROW_HEIGHT

    def bar_span(self, start, end):
        """(x, width) of a duration bar; width never drops below MIN_BAR_WIDTH."""
        x = self.position(start)
        return x, max(self.position(end) - x, MIN_BAR_WIDTH)

    def __eq__(self, other):
        if not isinstance(other, TimelineGeometry):
            return NotImplemented
        return (self.bounds, self.zoom) == (other.bounds, other.zoom)

    def __hash__(self):
        return hash((self.bounds, self.zoom))

    def __repr__(self):
        return f"TimelineGeometry({self.bounds.start}..{self.bounds.end}, {self.zoom.id})"
