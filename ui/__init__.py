"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_canvas, bar_state, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    array_controls,
    complexity_panel,
    stats_panel,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
    legend_panel,
)

__all__ = [
    "render_canvas",
    "bar_state",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "array_controls",
    "complexity_panel",
    "stats_panel",
    "analytics_panel",
    "comparison_panel",
    "pseudocode_viewer",
    "explanation_panel",
    "legend_panel",
]
