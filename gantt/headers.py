from dataclasses import dataclass

from gantt.bounds import add_days


@dataclass(frozen=True)
class MonthBand:
    label: str
    x: int
    width: int


@dataclass(frozen=True)
class DayCell:
    label: str
    day_name: str
    x: int
    is_weekend: bool
    is_today: bool


@dataclass(frozen=True)
class Headers:
    months: tuple
    days: tuple


def format_month_year(d) -> str:
    return d.strftime("%b %Y")


def format_day_name(d) -> str:
    return d.strftime("%a")


def build_headers(geometry) -> Headers:
    """
    Month bands over every day offset 0..total_days (inclusive), plus one
    DayCell per day when the zoom level shows day headers.
    """
    bounds = geometry.bounds
    day_width = geometry.day_width
    show_days = geometry.zoom.show_day_header

    months = []   # [label, x] until widths are known
    days = []
    current = None

    for i in range(geometry.total_days + 1):
        d = add_days(bounds.start, i)
        key = (d.year, d.month)
        if key != current:
            months.append([format_month_year(d), i * day_width])
            current = key

        if show_days:
            days.append(DayCell(
                label=str(d.day),
                day_name=format_day_name(d),
                x=i * day_width,
                is_weekend=d.weekday() >= 5,
                is_today=d == bounds.today,
            ))

    bands = []
    for n, (label, x) in enumerate(months):
        if n + 1 < len(months):
            width = months[n + 1][1] - x
        else:
            # last band absorbs whatever is left of the full width
            width = geometry.total_width - x
        bands.append(MonthBand(label=label, x=x, width=width))

    return Headers(months=tuple(bands), days=tuple(days))
