"""Headless smoke tests for the notebook GUI and its session state.

These tests run without a display and verify that:
1. build_gui returns a widget tree with a plot Output and one checkbox per block
2. a startup directory is loaded only when it is an existing directory
3. AppState replaces its result wholesale and tracks block visibility
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import ipywidgets as w
import pytest

from ram_clock_visualizer.gui.app import build_gui
from ram_clock_visualizer.gui.log_view import HtmlLog, classify
from ram_clock_visualizer.gui.state import AppState
from ram_clock_visualizer.ingest.discovery import InvalidDirectoryError


def _walk(widget):
    yield widget
    for child in getattr(widget, "children", ()):
        yield from _walk(child)


def _make_dir(root: Path) -> Path:
    (root / "one.csv").write_text("timestamp,rate\n0,1500\n1,1502\n", encoding="utf-8")
    (root / "two.csv").write_text("timestamp,rate\n0,1600\n", encoding="utf-8")
    (root / "three.csv").write_text("timestamp,rate\n0,1400\n", encoding="utf-8")
    return root


# -----------------------------------------------------------------------
# build_gui
# -----------------------------------------------------------------------


def test_build_gui_without_data() -> None:
    state = AppState()
    gui = build_gui(state=state)
    assert isinstance(gui, w.Widget)
    assert any(isinstance(x, w.Output) for x in _walk(gui))
    assert not any(isinstance(x, w.Checkbox) for x in _walk(gui))
    assert state.result is None


def test_build_gui_loads_startup_directory(tmp_path: Path) -> None:
    state = AppState()
    gui = build_gui(initial_dir=_make_dir(tmp_path), state=state)
    assert state.result is not None
    assert state.selected == {"A", "B", "C"}
    boxes = [x for x in _walk(gui) if isinstance(x, w.Checkbox)]
    assert [b.description for b in boxes] == ["A", "B", "C"]
    assert all(b.value for b in boxes)

    # unticking a box hides that block
    boxes[0].value = False
    assert state.selected == {"B", "C"}
    assert [s.name for s in state.series()] == ["B", "C"]


def test_build_gui_skips_invalid_startup_directory(tmp_path: Path) -> None:
    state = AppState()
    build_gui(initial_dir=tmp_path / "missing", state=state)
    assert state.result is None


def test_select_and_deselect_all_buttons(tmp_path: Path) -> None:
    state = AppState()
    gui = build_gui(initial_dir=_make_dir(tmp_path), state=state)
    buttons = {x.description: x for x in _walk(gui) if isinstance(x, w.Button)}

    buttons["Deselect all"].click()
    assert state.selected == set()
    assert state.title() == "RAM Block Clock Rates - No Data Selected"

    buttons["Select all"].click()
    assert state.selected == {"A", "B", "C"}


def test_export_button_writes_png(tmp_path: Path) -> None:
    state = AppState()
    gui = build_gui(initial_dir=_make_dir(tmp_path), state=state)
    texts = [x for x in _walk(gui) if isinstance(x, w.Text) and x.description == "PNG"]
    texts[0].value = str(tmp_path / "export")
    buttons = {x.description: x for x in _walk(gui) if isinstance(x, w.Button)}
    buttons["Export chart"].click()
    assert (tmp_path / "export.png").exists()
    assert texts[0].value == str(tmp_path / "export.png")


# -----------------------------------------------------------------------
# AppState
# -----------------------------------------------------------------------


def test_reload_replaces_result(tmp_path: Path) -> None:
    state = AppState()
    first = state.load(_make_dir(tmp_path))
    state.toggle("A", False)

    second = state.load(tmp_path)
    assert second is not first
    assert state.result is second
    assert state.selected == {"A", "B", "C"}


def test_failed_load_keeps_previous_result(tmp_path: Path) -> None:
    state = AppState()
    res = state.load(_make_dir(tmp_path))
    with pytest.raises(InvalidDirectoryError):
        state.load(tmp_path / "missing")
    assert state.result is res


def test_series_follow_selection(tmp_path: Path) -> None:
    state = AppState()
    assert state.series() == []
    state.load(_make_dir(tmp_path))
    state.set_all(False)
    assert state.series() == []
    state.toggle("C", True)
    assert [s.source_file_name for s in state.series()] == ["three.csv"]


# -----------------------------------------------------------------------
# HtmlLog
# -----------------------------------------------------------------------


def test_log_classify_and_coalesce() -> None:
    assert classify("ERROR: boom") == "error"
    assert classify("WARNING: hmm") == "warning"
    assert classify("Loaded 3 RAM blocks") == "info"

    log = HtmlLog(max_entries=3)
    log.write("ERROR: boom")
    log.write("ERROR: boom")
    assert len(log.entries) == 1
    assert log.entries[0].count == 2
    assert "(x2)" in log.widget.value

    log.extend(["a", "b", "c"])
    assert [e.message for e in log.entries] == ["a", "b", "c"]
