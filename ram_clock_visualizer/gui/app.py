from __future__ import annotations

import html
from pathlib import Path
from typing import Dict, Optional

import ipywidgets as w
import matplotlib.pyplot as plt

from ram_clock_visualizer.analysis.summary import format_load_summary, format_mapping_report
from ram_clock_visualizer.gui.chart_view import DEFAULT_EXPORT_NAME, draw_chart, export_chart_png
from ram_clock_visualizer.gui.log_view import HtmlLog
from ram_clock_visualizer.gui.state import AppState
from ram_clock_visualizer.models.config import LoaderConfig
from ram_clock_visualizer.scripts.sample_data import ensure_sample_data


APP_TITLE = "RAM Block Clocking Visualizer"

# Keep a single active GUI instance per kernel to avoid duplicated callbacks / stacked widgets.
_ACTIVE_GUI: Optional[w.Widget] = None


def _close_all_figures() -> None:
    try:
        plt.close("all")
    except Exception:
        pass


def _browse_for_folder() -> Optional[str]:
    try:
        import tkinter as tk
        from tkinter import filedialog

        root = tk.Tk()
        root.withdraw()
        root.attributes("-topmost", True)
        picked = filedialog.askdirectory(title="Select Directory with RAM Clocking Data")
        root.destroy()
        return picked or None
    except Exception:
        return None


def _saveas_dialog(initialdir: Optional[str]) -> Optional[str]:
    try:
        import tkinter as tk
        from tkinter import filedialog

        root = tk.Tk()
        root.withdraw()
        path = filedialog.asksaveasfilename(
            title="Save Chart As Image",
            defaultextension=".png",
            initialfile=DEFAULT_EXPORT_NAME,
            filetypes=[("PNG Image Files", "*.png")],
            initialdir=initialdir,
        )
        root.destroy()
        return path or None
    except Exception:
        return None


def build_gui(
    initial_dir: str | Path | None = None,
    config: Optional[LoaderConfig] = None,
    state: Optional[AppState] = None,
    sample_dir: str | Path = "sample_data",
) -> w.Widget:
    """
    RAM block clocking GUI (Jupyter / VSCode notebooks).

    Layout:
      - top: folder field, Browse…, Load, Load sample
      - left: one checkbox per block (visibility), Select all / Deselect all
      - centre: chart; below it the file -> block mapping
      - right: status and log

    initial_dir is loaded on startup when it is an existing directory; otherwise a
    diagnostic is logged and nothing is loaded.
    """
    global _ACTIVE_GUI

    if _ACTIVE_GUI is not None:
        try:
            _ACTIVE_GUI.close()
        except Exception:
            pass
        _ACTIVE_GUI = None

    st = state if state is not None else AppState(config=config or LoaderConfig())
    log = HtmlLog(title="Log", height_px=220)

    header = w.HTML(f"<h3>{html.escape(APP_TITLE)}</h3>")
    status = w.HTML("<b>Status:</b> idle")

    folder = w.Text(
        description="Folder",
        placeholder="directory containing *.csv files",
        layout=w.Layout(width="60%"),
    )
    btn_browse = w.Button(description="Browse…", layout=w.Layout(width="110px"))
    btn_load = w.Button(description="Load", button_style="primary", layout=w.Layout(width="110px"))
    btn_sample = w.Button(description="Load sample", layout=w.Layout(width="130px"))

    btn_all = w.Button(description="Select all", layout=w.Layout(width="180px"))
    btn_none = w.Button(description="Deselect all", layout=w.Layout(width="180px"))
    btn_refresh = w.Button(description="Refresh", layout=w.Layout(width="180px"))
    filter_box = w.VBox([w.HTML("<i>No data loaded.</i>")], layout=w.Layout(width="200px", overflow_y="auto"))

    export_path = w.Text(value=DEFAULT_EXPORT_NAME, description="PNG", layout=w.Layout(width="60%"))
    btn_export_browse = w.Button(description="Save as…", layout=w.Layout(width="110px"))
    btn_export = w.Button(description="Export chart", button_style="success", layout=w.Layout(width="130px"))

    out_plot = w.Output(layout=w.Layout(border="1px solid #ddd", padding="6px", height="560px", overflow="auto"))
    mapping = w.HTML()

    checkboxes: Dict[str, w.Checkbox] = {}
    bulk = {"active": False}

    def _set_status(s: str) -> None:
        status.value = f"<b>Status:</b> {html.escape(s)}"

    def _show_mapping() -> None:
        txt = format_mapping_report(st.result)
        mapping.value = (
            "<b>File to Block Name Mapping</b>"
            f"<pre style='border:1px solid #ddd; padding:6px; max-height:140px; overflow-y:auto;'>{html.escape(txt)}</pre>"
        )

    def _refresh_chart() -> None:
        with out_plot:
            out_plot.clear_output(wait=True)
            _close_all_figures()
            if st.result is None:
                print("No data loaded.")
                st.figure = None
                return
            series = st.series()
            fig = plt.figure(figsize=(10.0, 5.6))
            ax = fig.add_subplot(1, 1, 1)
            draw_chart(ax, series, st.title())
            plt.show()
            st.figure = fig

    def _on_checkbox(change) -> None:
        name = change["owner"].description
        st.toggle(name, bool(change["new"]))
        if not bulk["active"]:
            _refresh_chart()

    def _rebuild_filters() -> None:
        checkboxes.clear()
        names = st.block_names
        if not names:
            filter_box.children = [w.HTML("<i>No data loaded.</i>")]
            return
        boxes = []
        for name in names:
            cb = w.Checkbox(value=name in st.selected, description=name, indent=False)
            cb.observe(_on_checkbox, names="value")
            checkboxes[name] = cb
            boxes.append(cb)
        filter_box.children = boxes

    def _select_all(visible: bool) -> None:
        bulk["active"] = True
        try:
            for cb in checkboxes.values():
                cb.value = visible
        finally:
            bulk["active"] = False
        st.set_all(visible)
        _refresh_chart()

    def _load(directory: Path) -> bool:
        _set_status("loading…")
        try:
            result = st.load(directory)
        except Exception as exc:
            log.error(f"ERROR: Error loading data: {exc}")
            return False
        finally:
            _set_status("idle")

        folder.value = str(result.directory or directory)
        header.value = f"<h3>{html.escape(APP_TITLE)} - {html.escape(Path(folder.value).name)}</h3>"
        log.extend(result.warnings)
        log.info(format_load_summary(result))
        _rebuild_filters()
        _show_mapping()
        _refresh_chart()
        return True

    def _on_browse(_btn) -> None:
        picked = _browse_for_folder()
        if picked is None:
            log.warning("WARNING: Browse unavailable (headless environment). Paste the folder path manually.")
            return
        folder.value = picked
        _load(Path(picked))

    def _on_load(_btn) -> None:
        if not folder.value.strip():
            log.warning("WARNING: Enter a folder first.")
            return
        _load(Path(folder.value.strip()).expanduser())

    def _on_sample(_btn) -> None:
        try:
            root = ensure_sample_data(sample_dir)
        except OSError as exc:
            log.error(f"ERROR: Error creating sample data: {exc}")
            return
        if _load(root):
            header.value = f"<h3>{html.escape(APP_TITLE)} - Sample Data</h3>"
            log.info("Sample data loaded successfully.")

    def _on_export_browse(_btn) -> None:
        initialdir = str(st.result.directory) if st.result is not None and st.result.directory else None
        picked = _saveas_dialog(initialdir)
        if picked is None:
            log.warning("WARNING: Save dialog unavailable or cancelled; edit the PNG path manually.")
            return
        export_path.value = picked

    def _on_export(_btn) -> None:
        if st.result is None:
            log.warning("WARNING: No visualization to export. Load data first.")
            return
        target = export_path.value.strip() or DEFAULT_EXPORT_NAME
        try:
            written = export_chart_png(st.series(), st.title(), target)
        except Exception as exc:
            log.error(f"ERROR: Error saving chart: {exc}")
            return
        export_path.value = str(written)
        log.info(f"Chart saved successfully to: {written}")

    btn_browse.on_click(_on_browse)
    btn_load.on_click(_on_load)
    btn_sample.on_click(_on_sample)
    btn_all.on_click(lambda _b: _select_all(True))
    btn_none.on_click(lambda _b: _select_all(False))
    btn_refresh.on_click(lambda _b: _refresh_chart())
    btn_export_browse.on_click(_on_export_browse)
    btn_export.on_click(_on_export)

    _show_mapping()

    if initial_dir is not None:
        p = Path(initial_dir).expanduser()
        if p.is_dir():
            _load(p)
        else:
            log.error(f"ERROR: Invalid directory: {initial_dir}")

    top = w.HBox([folder, btn_browse, btn_load, btn_sample])
    left = w.VBox([w.HTML("<b>RAM Blocks</b>"), btn_all, btn_none, btn_refresh, filter_box])
    centre = w.VBox([out_plot, w.HBox([export_path, btn_export_browse, btn_export]), mapping], layout=w.Layout(width="70%"))
    right = w.VBox([status, log.panel], layout=w.Layout(width="30%"))
    gui = w.VBox([header, top, w.HBox([left, centre, right])])

    _ACTIVE_GUI = gui
    return gui
