"""GUI package - interactive ipywidgets interface.

The notebook GUI lets the operator:
1. Pick a directory of clock-rate CSV files (or generate sample data)
2. Toggle the visibility of each RAM block in the chart
3. Read the file -> block mapping with average and range per block
4. Export the chart as a PNG image

Entry point:
    from ram_clock_visualizer.gui.app import build_gui
    gui = build_gui()

Session state lives in one AppState object owned by build_gui and shared with
its callbacks; a reload replaces the ParsedResult wholesale.
"""
