from dataclasses import dataclass


@dataclass(frozen=True)
class ZoomLevel:
    id: str
    label: str
    day_width: int      # px per calendar day
    days_visible: int
    show_day_header: bool


# Ordered from closest to widest
ZOOM_LEVELS = (
    ZoomLevel("week", "Week", 40, 14, True),
    ZoomLevel("month", "Month", 24, 30, True),
    ZoomLevel("quarter", "Quarter", 8, 90, False),
    ZoomLevel("halfYear", "6 Months", 4, 180, False),
)
ZOOM_IDS = tuple(z.id for z in ZOOM_LEVELS)
DEFAULT_ZOOM = "month"


def get_zoom(zoom_id: str) -> ZoomLevel:
    for z in ZOOM_LEVELS:
        if z.id == zoom_id:
            return z
    raise ValueError(f"unknown zoom level: {zoom_id!r}")


def zoom_in(zoom_id: str) -> str:
    """One step toward "week"; stays put at the boundary."""
    i = ZOOM_IDS.index(get_zoom(zoom_id).id)
    return ZOOM_IDS[max(0, i - 1)]


def zoom_out(zoom_id: str) -> str:
    """One step toward "halfYear"; stays put at the boundary."""
    i = ZOOM_IDS.index(get_zoom(zoom_id).id)
    return ZOOM_IDS[min(len(ZOOM_IDS) - 1, i + 1)]


def can_zoom_in(zoom_id: str) -> bool:
    return zoom_in(zoom_id) != zoom_id


def can_zoom_out(zoom_id: str) -> bool:
    return zoom_out(zoom_id) != zoom_id
