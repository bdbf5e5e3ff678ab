import hashlib
import logging
import streamlit as st

from gantt.state import FILTERS, load_payload

LOG = logging.getLogger("gantt")

FILTER_LABELS = {
    "all": "All",
    "tasks": "Tasks",
    "milestones": "Milestones",
    "rfis": "RFIs",
    "submittals": "Submittals",
}

def render_sidebar(state, controller):
    """Data import, filter and viewport options. Returns the actions the page should run."""
    actions = {}
    with st.sidebar:
        st.header("📂 Data")

        uploaded = st.file_uploader("Import JSON", type=["json"])
        if uploaded is not None:
            text = uploaded.read().decode("utf-8", errors="replace")
            h = hashlib.sha256(text.encode("utf-8")).hexdigest()
            if h != state.get("_last_import_hash", ""):
                state["_last_import_hash"] = h
                try:
                    payload = load_payload(text)
                except ValueError as e:
                    LOG.warning("import rejected: %s", e)
                    st.error(f"Import failed: {e}. Expect JSON with project/tasks/milestones/rfis/submittals.")
                else:
                    actions["import"] = payload
                    counts = {k: len(v) for k, v in payload.items() if isinstance(v, list)}
                    LOG.info("imported payload: %s", counts)
                    st.success("Imported " + ", ".join(f"{n} {k}" for k, n in counts.items()) + ".")

        if st.button("Load demo project", type="secondary", key="load_demo"):
            actions["demo"] = True

        st.divider()
        st.header("🔎 View")
        choice = st.radio(
            "Show",
            options=list(FILTERS),
            index=FILTERS.index(controller.filter),
            format_func=lambda f: FILTER_LABELS[f],
            horizontal=True,
        )
        if choice != controller.filter:
            actions["filter"] = choice

        width = st.number_input(
            "Viewport width (px)",
            min_value=300,
            max_value=4000,
            step=50,
            value=int(controller.viewport.viewport_width),
            help="Width of the scrolling timeline pane; drives auto-scroll and paging.",
        )
        if width != controller.viewport.viewport_width:
            actions["viewport_width"] = width

    return actions
