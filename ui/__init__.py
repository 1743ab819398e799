"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_bars, bar_color, CanvasConfig

from ui.controls import (
    MIN_ARRAY_SIZE,
    MAX_ARRAY_SIZE,
    playback_controls,
    algorithm_selector,
    array_generator,
    statistics_panel,
    pseudocode_viewer,
    explanation_panel,
)

__all__ = [
    "render_bars",
    "bar_color",
    "CanvasConfig",
    "MIN_ARRAY_SIZE",
    "MAX_ARRAY_SIZE",
    "playback_controls",
    "algorithm_selector",
    "array_generator",
    "statistics_panel",
    "pseudocode_viewer",
    "explanation_panel",
]
