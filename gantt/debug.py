import logging
import streamlit as st
LOG = logging.getLogger("gantt")

def debug_snapshot(controller, layout) -> dict:
    snap = {
        "items": len(layout.items),
        "filter": controller.filter,
        "zoom": controller.zoom,
        "hovered_id": controller.hovered_id,
        "today": controller.today.isoformat(),
        "viewport_width": controller.viewport.viewport_width,
        "scroll_left": layout.scroll_left,
    }
    if not layout.is_empty:
        snap["bounds"] = {"start": layout.bounds.start.isoformat(), "end": layout.bounds.end.isoformat()}
        snap["total_width"] = layout.geometry.total_width
        snap["today_x"] = layout.today_x
        snap["months"] = len(layout.headers.months)
    return snap

def render_debug_panel(controller, layout):
    with st.expander("🐞 Debug", expanded=False):
        snap = debug_snapshot(controller, layout)
        st.json(snap)
        if st.button("Log snapshot"):
            LOG.info("DEBUG_SNAPSHOT: %s", snap)
            st.toast("Snapshot logged", icon="🪵")
