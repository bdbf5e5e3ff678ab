import json
import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from gantt.ids import item_id

LOG = logging.getLogger("gantt")

# Item types
TASK = "task"
MILESTONE = "milestone"
RFI = "rfi"
SUBMITTAL = "submittal"
PROJECT_DATE = "projectDate"
ITEM_TYPES = (TASK, MILESTONE, RFI, SUBMITTAL, PROJECT_DATE)

# Project key date sub types
ONLINE = "online"
OFFLINE = "offline"
DELIVERY = "delivery"

FILTERS = ("all", "tasks", "milestones", "rfis", "submittals")

# fromisoformat on 3.10 only takes 3 or 6 fraction digits
_FRACTION = re.compile(r"\.(\d+)")

# (sub type, record keys, display name)
PROJECT_KEY_DATES = (
    (ONLINE, ("target_online_date", "targetOnlineDate"), "Factory Online"),
    (OFFLINE, ("target_offline_date", "targetOfflineDate"), "Factory Offline"),
    (DELIVERY, ("delivery_date", "deliveryDate"), "Delivery Date"),
)


@dataclass(frozen=True)
class TimelineItem:
    id: str
    type: str
    name: str
    date: date
    start_date: date | None = None
    status: str | None = None
    sub_type: str | None = None
    # originating record; read, never mutated
    source_ref: object = field(default=None, compare=False, repr=False, hash=False)


def coerce_date(v):
    """Coerce date, datetime or string into a date(); None when it cannot be read."""
    if v is None or v == "":
        return None
    if isinstance(v, datetime):
        if v.tzinfo is not None:
            v = v.astimezone(timezone.utc)
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str):
        s = v.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        s = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), s, count=1)
        try:
            return coerce_date(datetime.fromisoformat(s))
        except ValueError:
            pass
        for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%m/%d/%Y"):
            try:
                return datetime.strptime(s, fmt).date()
            except ValueError:
                continue
    return None


def _field(record, *keys):
    if not isinstance(record, dict):
        return None
    for k in keys:
        v = record.get(k)
        if v is not None and v != "":
            return v
    return None


def _wants(active_filter: str, kind: str) -> bool:
    return active_filter == "all" or active_filter == kind


def rfi_name(record) -> str:
    number = _field(record, "number")
    subject = _field(record, "subject") or ""
    return f"RFI-{str(number if number is not None else '').zfill(3)}: {subject}"


def submittal_name(record) -> str:
    section = _field(record, "spec_section", "specSection") or ""
    title = _field(record, "title") or ""
    return f"{section} - {title}"


def normalize_items(project=None, tasks=(), milestones=(), rfis=(), submittals=(), active_filter="all"):
    """
    Merge the raw collections into one date-sorted list of TimelineItem.

    Project key dates are kept whatever the filter; every other collection only
    when the filter is "all" or names it. Records without a readable due date
    are skipped.
    """
    if active_filter not in FILTERS:
        raise ValueError(f"unknown filter: {active_filter!r}")

    items = []
    seen = set()
    dropped = 0

    # ---------- Project key dates ----------
    for sub_type, keys, name in PROJECT_KEY_DATES:
        d = coerce_date(_field(project, *keys))
        if d is None:
            continue
        items.append(TimelineItem(
            id=item_id("project", sub_type, seen),
            type=PROJECT_DATE,
            name=name,
            date=d,
            sub_type=sub_type,
        ))

    # ---------- Milestones ----------
    if _wants(active_filter, "milestones"):
        for m in milestones or ():
            d = coerce_date(_field(m, "due_date", "dueDate"))
            if d is None:
                dropped += 1
                continue
            items.append(TimelineItem(
                id=item_id(MILESTONE, _field(m, "id"), seen),
                type=MILESTONE,
                name=_field(m, "name") or "",
                date=d,
                status=_field(m, "status"),
                source_ref=m,
            ))

    # ---------- Tasks ----------
    if _wants(active_filter, "tasks"):
        for t in tasks or ():
            d = coerce_date(_field(t, "due_date", "dueDate"))
            if d is None:
                dropped += 1
                continue
            start = coerce_date(_field(t, "start_date", "startDate")) or d
            items.append(TimelineItem(
                id=item_id(TASK, _field(t, "id"), seen),
                type=TASK,
                name=_field(t, "title") or "",
                date=d,
                start_date=start,
                status=_field(t, "status"),
                source_ref=t,
            ))

    # ---------- RFIs ----------
    if _wants(active_filter, "rfis"):
        for r in rfis or ():
            d = coerce_date(_field(r, "due_date", "dueDate"))
            if d is None:
                dropped += 1
                continue
            items.append(TimelineItem(
                id=item_id(RFI, _field(r, "id"), seen),
                type=RFI,
                name=rfi_name(r),
                date=d,
                status=_field(r, "status"),
                source_ref=r,
            ))

    # ---------- Submittals ----------
    if _wants(active_filter, "submittals"):
        for s in submittals or ():
            d = coerce_date(_field(s, "due_date", "dueDate"))
            if d is None:
                dropped += 1
                continue
            items.append(TimelineItem(
                id=item_id(SUBMITTAL, _field(s, "id"), seen),
                type=SUBMITTAL,
                name=submittal_name(s),
                date=d,
                status=_field(s, "status"),
                source_ref=s,
            ))

    if dropped:
        LOG.debug("normalize_items: skipped %d records without a due date", dropped)

    # sorted() is stable, so equal dates keep encounter order
    return sorted(items, key=lambda it: it.date)


# ---------- Payload import ----------
PAYLOAD_KEYS = ("project", "tasks", "milestones", "rfis", "submittals")


def empty_payload() -> dict:
    return {"project": {}, "tasks": [], "milestones": [], "rfis": [], "submittals": []}


def _get_case_insensitive(d: dict, key: str):
    for k in d.keys():
        if k.lower() == key.lower():
            return d[k]
    return None


def load_payload(text: str) -> dict:
    """
    Parse a JSON document into {project, tasks, milestones, rfis, submittals}.
    Accepts the collections at the root or nested under "data"; keys are
    matched case-insensitively. Raises ValueError for anything else.
    """
    doc = json.loads(text)
    if not isinstance(doc, dict):
        raise ValueError("expected a JSON object at the top level")

    root = doc
    nested = _get_case_insensitive(doc, "data")
    if isinstance(nested, dict):
        root = nested

    out = empty_payload()
    found = False
    for key in PAYLOAD_KEYS:
        v = _get_case_insensitive(root, key)
        if v is None:
            continue
        want = dict if key == "project" else list
        if not isinstance(v, want):
            raise ValueError(f"'{key}' must be a JSON {'object' if want is dict else 'array'}")
        out[key] = v if key == "project" else [x for x in v if isinstance(x, dict)]
        found = True

    if not found:
        raise ValueError("no project, tasks, milestones, rfis or submittals found")
    return out
