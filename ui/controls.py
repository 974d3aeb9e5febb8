"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls       – start/pause/next/prev/reset/speed
  • algorithm_selector      – dropdown + search target input
  • array_controls          – size slider, random / custom array
  • complexity_panel        – best / average / worst for the selection
  • stats_panel             – progress, comparisons, swaps, size, steps
  • analytics_panel         – metrics of a completed run
  • comparison_panel        – side-by-side metrics of two runs
  • pseudocode_viewer       – with live line highlighting
  • explanation_panel       – Learning Mode "why this step happened"
  • legend_panel            – what the bar colors mean

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Optional, List

import config
from algorithms import AlgoInfo
from engine import RunMetrics, ComparisonResult, SPEED_PRESETS
from ui.canvas import CONFIG as CANVAS_CONFIG


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    speed: str = config.DEFAULT_SPEED,
    is_finished: bool = False,
) -> str:
    play_icon = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"

    options = []
    for preset in SPEED_PRESETS:
        sel = 'selected' if preset == speed else ''
        options.append(f'<option value="{preset}" {sel}>{preset.capitalize()}</option>')

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-reset" title="Reset to start">⏮</button>
        <button id="btn-prev" title="Previous step">◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Next step">▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">
          {''.join(options)}
        </select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = config.DEFAULT_ALGORITHM,
    target: int = config.DEFAULT_TARGET,
) -> str:
    groups = {"sorting": [], "searching": []}
    selected: Optional[AlgoInfo] = None
    for algo in algorithms:
        sel = ''
        if algo.key == selected_key:
            sel = 'selected'
            selected = algo
        groups[algo.category.value].append(
            f'<option value="{algo.key}" {sel}>{algo.name} — {algo.complexity.average}</option>'
        )

    target_block = ""
    if selected is not None and selected.is_search:
        target_block = f"""
        <div class="target-picker">
          <label>Search target:</label>
          <input type="number" id="target-input" min="{config.MIN_VALUE}" max="{config.MAX_VALUE}" value="{target}">
        </div>
        """

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector">
        <optgroup label="Sorting">{''.join(groups['sorting'])}</optgroup>
        <optgroup label="Searching">{''.join(groups['searching'])}</optgroup>
      </select>
      {target_block}
      <button id="btn-run" class="btn-primary">▶ Run Algorithm</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Controls
# ---------------------------------------------------------------------------
def array_controls(size: int = config.DEFAULT_ARRAY_SIZE) -> str:
    return f"""
    <div class="panel array-controls">
      <h3>📶 Array</h3>
      <label>Size: <span id="array-size-val">{size}</span></label>
      <input type="range" id="array-size" min="{config.MIN_ARRAY_SIZE}" max="{config.MAX_ARRAY_SIZE}" value="{size}">
      <button id="btn-gen-random" class="btn-secondary">🎲 New Random Array</button>
      <textarea id="array-text" rows="2" placeholder="5, 3, 8, 1"></textarea>
      <button id="btn-import" class="btn-secondary">Use These Values</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Complexity
# ---------------------------------------------------------------------------
def complexity_panel(algo: Optional[AlgoInfo] = None) -> str:
    if algo is None:
        return """
        <div class="panel complexity-panel">
          <h3>⏱ Complexity</h3>
          <p class="placeholder">Select an algorithm.</p>
        </div>
        """

    return f"""
    <div class="panel complexity-panel">
      <h3>⏱ Complexity — {algo.name}</h3>
      <p>{escape(algo.description)}</p>
      <table>
        <tr><td>Best:</td><td><strong>{algo.complexity.best}</strong></td></tr>
        <tr><td>Average:</td><td><strong>{algo.complexity.average}</strong></td></tr>
        <tr><td>Worst:</td><td><strong>{algo.complexity.worst}</strong></td></tr>
        <tr><td>Space:</td><td><strong>{algo.complexity_space}</strong></td></tr>
        <tr><td>Category:</td><td><strong>{algo.category.value}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Live Stats
# ---------------------------------------------------------------------------
def stats_panel(
    comparisons: int = 0,
    swaps: int = 0,
    array_size: int = 0,
    current_step: int = 0,
    total_steps: int = 0,
) -> str:
    progress = (current_step / total_steps * 100) if total_steps > 0 else 0

    return f"""
    <div class="panel stats-panel">
      <h3>📈 Statistics</h3>
      <div class="progress"><div class="progress-bar" style="width: {progress:.1f}%"></div></div>
      <p>{current_step} / {total_steps}</p>
      <table>
        <tr><td>Comparisons:</td><td><strong id="stat-comparisons">{comparisons}</strong></td></tr>
        <tr><td>Swaps/Moves:</td><td><strong id="stat-swaps">{swaps}</strong></td></tr>
        <tr><td>Array Size:</td><td><strong>{array_size}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{total_steps}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    search_row = ""
    if metrics.category == "searching":
        status = f"✅ Found at {metrics.found_index}" if metrics.found else "❌ Not Found"
        search_row = f"<tr><td>Target {metrics.target}:</td><td><strong>{status}</strong></td></tr>"

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_name}</h3>
      <table>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swaps/Moves:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Memory:</td><td><strong>{metrics.memory_bytes // 1024} KB</strong></td></tr>
        {search_row}
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison Mode</h3>
          <p class="placeholder">Run two algorithms on the same array to compare.</p>
        </div>
        """

    left = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {winner_label}"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison: {left.algo_name} vs {right.algo_name}</h3>
      <table class="comparison-table">
        <thead>
          <tr><th>Metric</th><th>{left.algo_name}</th><th>{right.algo_name}</th><th>Winner</th></tr>
        </thead>
        <tbody>
          <tr>
            <td>Comparisons</td><td>{left.comparisons}</td><td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Swaps/Moves</td><td>{left.swaps}</td><td>{right.swaps}</td>
            <td>{winner_badge(comp.winner_swaps)}</td>
          </tr>
          <tr>
            <td>Total Steps</td><td>{left.total_steps}</td><td>{right.total_steps}</td>
            <td>{winner_badge(comp.winner_steps)}</td>
          </tr>
          <tr>
            <td>Wall Time</td><td>{left.wall_time_ms:.2f} ms</td><td>{right.wall_time_ms:.2f} ms</td>
            <td>—</td>
          </tr>
        </tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div class="placeholder">Select an algorithm to view pseudocode</div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel (Learning Mode)
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return ('<div class="explanation-text">▶ Click <strong>Run Algorithm</strong> to see '
                'step-by-step explanations of what\'s happening at each stage.</div>')
    return f'<div class="explanation-text">{escape(explanation)}</div>'


# ---------------------------------------------------------------------------
# Color Legend
# ---------------------------------------------------------------------------
def legend_panel() -> str:
    descriptions = {
        "compared":  "Elements being compared",
        "swapped":   "Elements being swapped",
        "sorted":    "Elements in final position",
        "highlight": "Pivot / key / search cursor",
    }
    rows = []
    for key, text in descriptions.items():
        color = CANVAS_CONFIG.bar_colors[key]
        rows.append(f'<div class="legend-row"><span class="swatch" style="background: {color}"></span>{text}</div>')

    return f"""
    <div class="panel legend-panel">
      <h3>🎨 Color Legend</h3>
      {''.join(rows)}
    </div>
    """
