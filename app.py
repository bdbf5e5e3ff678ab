# app.py — project Gantt timeline
# - Tasks as duration bars, milestones as diamonds, RFIs/submittals as markers
# - Project key dates (online / offline / delivery) as dashed guide lines, shown under every filter
# - Zoom week → 6 months, paging by half a viewport, auto-scroll to today
# - JSON import of {project, tasks, milestones, rfis, submittals}; demo project otherwise
# - Debug expander

import logging
from datetime import date

import streamlit as st

from gantt.styles import GLOBAL_CSS
from gantt.sample import demo_payload
from gantt.sidebar import render_sidebar
from gantt.timeline import render_timeline, render_legend
from gantt.view import GanttController
from gantt.zoom import get_zoom, can_zoom_in, can_zoom_out
from gantt.debug import render_debug_panel

# ---------- Page & logging ----------
st.set_page_config(page_title="Project Timeline", page_icon="📅", layout="wide")
st.markdown(GLOBAL_CSS, unsafe_allow_html=True)
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
LOG = logging.getLogger("gantt")

# ---------- Session ----------
ss = st.session_state
ss.setdefault("_last_import_hash", "")
ss.setdefault("opened_item", None)   # {"type": ..., "record": ...} from the last click
if "gantt" not in ss:
    ss["gantt"] = GanttController(demo_payload())
controller = ss["gantt"]


def _open_item(item_type, record):
    ss["opened_item"] = {"type": item_type, "record": record}
    LOG.info("opened %s %s", item_type, record.get("id") if isinstance(record, dict) else "")

controller.on_item_click = _open_item

# ---------- Sidebar ----------
actions = render_sidebar(ss, controller)
if "import" in actions:
    controller.set_payload(actions["import"], today=date.today())
    ss["opened_item"] = None
if actions.get("demo"):
    today = date.today()
    controller.set_payload(demo_payload(today), today=today)
    ss["opened_item"] = None
if "filter" in actions:
    controller.dispatch("set_filter", actions["filter"])
if "viewport_width" in actions:
    controller.set_viewport_width(actions["viewport_width"])

# ---------- Page ----------
st.title("📅 Project Timeline")

zoom = get_zoom(controller.zoom)
c_legend, c_left, c_in, c_label, c_out, c_right = st.columns([6, 1, 1, 2, 1, 1])
with c_legend:
    st.markdown(render_legend(), unsafe_allow_html=True)
with c_left:
    st.button("◀", key="page_left", on_click=controller.dispatch, args=("page_left",))
with c_in:
    st.button("➕", key="zoom_in", on_click=controller.dispatch, args=("zoom_in",),
              disabled=not can_zoom_in(zoom.id), help="Zoom in")
with c_label:
    st.markdown(f"<div style='text-align:center;font-weight:600'>{zoom.label}</div>", unsafe_allow_html=True)
with c_out:
    st.button("➖", key="zoom_out", on_click=controller.dispatch, args=("zoom_out",),
              disabled=not can_zoom_out(zoom.id), help="Zoom out")
with c_right:
    st.button("▶", key="page_right", on_click=controller.dispatch, args=("page_right",))

layout = controller.layout()
rows = controller.label_rows(layout)
labels = {r["id"]: r["name"] for r in rows}


def _on_hover_pick():
    picked = ss.get("hover_pick", "(none)")
    if picked == "(none)":
        controller.dispatch("pointer_leave")
    else:
        controller.dispatch("pointer_enter", picked)


def _on_open_pick():
    picked = ss.get("open_pick", "(none)")
    if picked != "(none)":
        controller.dispatch("click", picked)


if not layout.is_empty:
    h1, h2 = st.columns(2)
    with h1:
        st.selectbox(
            "Highlight item",
            options=["(none)"] + [r["id"] for r in rows],
            format_func=lambda v: v if v == "(none)" else labels.get(v, v),
            key="hover_pick",
            on_change=_on_hover_pick,
        )
    with h2:
        st.selectbox(
            "Open item",
            options=["(none)"] + [r["id"] for r in rows if r["clickable"]],
            format_func=lambda v: v if v == "(none)" else labels.get(v, v),
            key="open_pick",
            on_change=_on_open_pick,
        )

render_timeline(layout, rows)

tip = controller.tooltip(layout)
if tip:
    status = f" · :gray[{tip['status']}]" if tip["status"] else ""
    st.caption(f"**{tip['name']}** · {tip['date']}{status}")

opened = ss.get("opened_item")
if opened:
    st.subheader(f"🗂️ {opened['type']}")
    st.json(opened["record"])

# ---- Debug ----
render_debug_panel(controller, layout)
