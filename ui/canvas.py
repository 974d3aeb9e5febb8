"""
canvas.py — SVG Bar Chart Renderer
====================================
Pure rendering function: Step → SVG string.

The renderer consumes:
  • step       – the current Step snapshot (array + marker index lists)
  • config     – visual config (canvas size, colors, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  This function is stateless — the caller passes in
    everything it needs and gets back a string.
  - One bar per array slot, height scaled to the largest value.
  - Bar color is picked by precedence: sorted, swapped, compared,
    highlight, default.  A bar that is both "sorted" and "highlight"
    (a search hit) therefore shows as sorted.
"""

from typing import Dict, List, Optional

from algorithms.step import Step


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 800
    height: int = 400
    bg:     str = "#131318"

    # bar colors (marker → fill)
    bar_colors: Dict[str, str] = {
        "default":   "#8c8c96",   # grey
        "compared":  "#64b4ff",   # blue
        "swapped":   "#ff6464",   # red
        "sorted":    "#a8e691",   # green
        "highlight": "#ffb464",   # orange
    }

    bar_stroke:         str   = "#32323c"
    bar_fill_ratio:     float = 0.9     # bar width vs slot width
    chart_width_ratio:  float = 0.9     # share of canvas width used by bars
    chart_height_ratio: float = 0.85
    bottom_margin:      int   = 20

    # value labels
    label_color:      str = "#e6e6eb"
    label_size:       int = 10
    label_min_height: int = 30          # don't label bars shorter than this

    # legend
    legend_color:  str = "#b4b4be"
    legend_size:   int = 11
    legend_labels: Dict[str, str] = {
        "compared":  "Comparing",
        "swapped":   "Swapping",
        "sorted":    "Sorted",
        "highlight": "Current",
    }


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    step: Optional[Step] = None,
    config: CanvasConfig = CONFIG,
    show_legend: bool = True,
    array: Optional[List[int]] = None,
) -> str:
    """
    Returns an SVG string.

    Args:
        step        : Current algorithm step (or None for a static array).
        config      : Visual config.
        show_legend : If True, draw the color legend under the chart.
        array       : Values to draw when there is no step yet.
    """
    values = list(step.array) if step else list(array or [])

    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if values:
        max_value = max(max(values), 1)
        slot = (config.width * config.chart_width_ratio) / len(values)
        padding = (config.width * (1 - config.chart_width_ratio)) / 4
        for index, value in enumerate(values):
            svg_parts.append(
                _render_bar(index, value, max_value, slot, padding, step, config)
            )

    if show_legend:
        svg_parts.append(_render_legend(config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def bar_state(index: int, step: Optional[Step]) -> str:
    """Which color key applies to bar `index` in this step."""
    if step is None:
        return "default"
    for marker in ("sorted", "swapped", "compared", "highlight"):
        indices = getattr(step, marker)
        if indices is not None and index in indices:
            return marker
    return "default"


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(
    index: int,
    value: int,
    max_value: int,
    slot: float,
    padding: float,
    step: Optional[Step],
    config: CanvasConfig,
) -> str:
    # negative values are drawn as empty bars
    bar_height = max(value, 0) / max_value * (config.height * config.chart_height_ratio)
    bar_width = slot * config.bar_fill_ratio
    x = padding + index * slot
    y = config.height - bar_height - config.bottom_margin

    fill = config.bar_colors[bar_state(index, step)]

    parts = [
        f'<g class="bar" data-index="{index}">',
        f'  <rect x="{x:.2f}" y="{y:.2f}" width="{bar_width:.2f}" height="{bar_height:.2f}" '
        f'fill="{fill}" stroke="{config.bar_stroke}" stroke-width="1"/>',
    ]
    if bar_height > config.label_min_height:
        parts.append(
            f'  <text x="{x + bar_width / 2:.2f}" y="{y + bar_height / 2 + 4:.2f}" '
            f'text-anchor="middle" font-size="{config.label_size}" font-family="monospace" '
            f'fill="{config.label_color}">{value}</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
def _render_legend(config: CanvasConfig) -> str:
    y = config.height - 10
    x = 20
    parts = ['<g class="legend">']
    for key, label in config.legend_labels.items():
        parts.append(
            f'  <rect x="{x}" y="{y - 12}" width="10" height="10" fill="{config.bar_colors[key]}"/>'
        )
        parts.append(
            f'  <text x="{x + 15}" y="{y - 3}" font-size="{config.legend_size}" '
            f'font-family="sans-serif" fill="{config.legend_color}">{label}</text>'
        )
        x += 130
    parts.append('</g>')
    return "\n".join(parts)
