DEFAULT_VIEWPORT_WIDTH = 900
PAGE_FRACTION = 0.5


def auto_scroll(geometry, viewport_width) -> float:
    """Scroll offset that puts today at the left quarter of the viewport."""
    return max(0, geometry.today_x - viewport_width / 4)


def max_scroll(geometry, viewport_width) -> float:
    return max(0, geometry.total_width - viewport_width)


class ViewportController:
    """
    Horizontal scroll state of the timeline pane. Re-centres on today whenever
    the (bounds, zoom) pair changes; pages by half a viewport otherwise.
    """

    def __init__(self, viewport_width=DEFAULT_VIEWPORT_WIDTH):
        self.viewport_width = viewport_width
        self.scroll_left = 0
        self._key = None

    def sync(self, geometry):
        key = (geometry.bounds, geometry.zoom.id)
        if key != self._key:
            self._key = key
            # the pane cannot scroll past its content
            self.scroll_left = min(auto_scroll(geometry, self.viewport_width), max_scroll(geometry, self.viewport_width))
        return self.scroll_left

    def resize(self, viewport_width, geometry=None):
        self.viewport_width = viewport_width
        self._key = None
        if geometry is not None:
            self.sync(geometry)

    def page(self, direction: int, geometry) -> float:
        step = self.viewport_width * PAGE_FRACTION
        target = self.scroll_left + (step if direction > 0 else -step)
        self.scroll_left = min(max(0, target), max_scroll(geometry, self.viewport_width))
        return self.scroll_left

    def page_left(self, geometry) -> float:
        return self.page(-1, geometry)

    def page_right(self, geometry) -> float:
        return self.page(1, geometry)
