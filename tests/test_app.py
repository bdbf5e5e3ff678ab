"""
Smoke tests for the Streamlit page, driven through streamlit's AppTest.
"""

from datetime import date
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    return at


def test_renders_demo_project(app):
    assert not app.exception
    assert app.title[0].value == "📅 Project Timeline"
    assert app.session_state["gantt"].zoom == "month"


def test_zoom_buttons(app):
    app.button(key="zoom_in").click().run()
    assert app.session_state["gantt"].zoom == "week"
    assert app.button(key="zoom_in").disabled

    app.button(key="zoom_out").click().run()
    app.button(key="zoom_out").click().run()
    assert app.session_state["gantt"].zoom == "quarter"


def test_filter_radio(app):
    app.radio[0].set_value("rfis").run()
    assert not app.exception
    controller = app.session_state["gantt"]
    assert controller.filter == "rfis"
    assert {it.type for it in controller.items()} == {"rfi", "projectDate"}


def test_open_item_passes_original_record(app):
    app.selectbox(key="open_pick").set_value("task-2").run()
    opened = app.session_state["opened_item"]
    assert opened["type"] == "task"
    assert opened["record"]["title"] == "Foundation pour"


def test_highlight_sets_hover(app):
    app.selectbox(key="hover_pick").set_value("rfi-7").run()
    assert app.session_state["gantt"].hovered_id == "rfi-7"
    app.selectbox(key="hover_pick").set_value("(none)").run()
    assert app.session_state["gantt"].hovered_id is None


def test_load_demo_reanchors_today(app):
    controller = app.session_state["gantt"]
    controller.today = date(2000, 1, 1)
    app.button(key="load_demo").click().run()
    assert not app.exception
    layout = app.session_state["gantt"].layout()
    assert layout.bounds.today == date.today()
