"""
main.py — Sorting & Searching Visualizer Flask App
====================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/algorithms         – catalog (name, category, complexity)
  GET  /api/state              – current run state (for polling)
  POST /api/config/algo        – select algorithm
  POST /api/config/target      – set search target
  POST /api/config/speed       – preset name or 10–200 slider value
  POST /api/array/generate     – new random array
  POST /api/array/import       – user-typed array
  POST /api/run                – build the trace for the current selection
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/step/reset         – back to step 0 (same trace)
  POST /api/step/end           – jump to the last step
  POST /api/step/play          – toggle play/pause
  POST /api/compare            – run two algorithms on the current array

State management:
  Small settings (array, algorithm, target, speed) live in the Flask
  session cookie.  The drained step list is far too large for a cookie,
  so each session's Stepper is kept in the in-process RUNS dict, keyed
  by a random session id.  RUNS holds at most MAX_RUNS entries; the
  least recently used run is evicted first.  Nothing is persisted
  across restarts.
"""

import logging
import os
import secrets
import sys
import threading
from collections import OrderedDict
from typing import Dict, Optional, Any

from flask import Flask, render_template_string, request, jsonify, session

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from algorithms import get_algorithm, generate, list_algorithms, AlgoInfo
from engine import Stepper, Recorder, compare, random_array, parse_array, clamp_size
from ui import (
    render_canvas,
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

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_object(config)
app.config.from_prefixed_env()

RUNS: "OrderedDict[str, Stepper]" = OrderedDict()
_runs_lock = threading.Lock()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_array():
    """Array from session, or a fresh random one."""
    if "array" not in session:
        session["array"] = random_array(app.config["DEFAULT_ARRAY_SIZE"])
    return list(session["array"])


def get_state():
    """Return current app settings as a dict."""
    return {
        "selected_algo": session.get("selected_algo", app.config["DEFAULT_ALGORITHM"]),
        "target":        session.get("target", app.config["DEFAULT_TARGET"]),
        "speed":         session.get("speed", app.config["DEFAULT_SPEED"]),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def get_stepper() -> Optional[Stepper]:
    sid = session.get("sid")
    if sid is None:
        return None
    with _runs_lock:
        stepper = RUNS.get(sid)
        if stepper is not None:
            RUNS.move_to_end(sid)
        return stepper


def save_stepper(stepper: Optional[Stepper]) -> None:
    """Store (or, with None, discard) this session's run."""
    if "sid" not in session:
        session["sid"] = secrets.token_hex(16)
    with _runs_lock:
        if stepper is None:
            RUNS.pop(session["sid"], None)
        else:
            RUNS[session["sid"]] = stepper
            RUNS.move_to_end(session["sid"])
            while len(RUNS) > app.config["MAX_RUNS"]:
                evicted, _ = RUNS.popitem(last=False)
                logger.info("Evicted run for session %s", evicted[:8])


def apply_speed(stepper: Stepper, speed) -> None:
    """`speed` is either a preset name or a 10–200 slider value."""
    if isinstance(speed, (int, float)):
        stepper.set_speed_slider(int(speed))
    else:
        stepper.set_speed(str(speed))


def json_body() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


def step_payload(stepper: Stepper, info: Optional[AlgoInfo]) -> Dict[str, Any]:
    """Everything the page re-renders after the current step changes."""
    step = stepper.current_step
    snap = stepper.snapshot()
    return {
        **snap,
        "step":        step.to_dict() if step else None,
        "svg":         render_canvas(step),
        "pseudocode":  pseudocode_viewer(info.pseudocode if info else [],
                                         step.pseudocode_line if step else -1),
        "explanation": explanation_panel(step.explanation if step else ""),
        "stats":       stats_panel(
            comparisons=stepper.comparisons,
            swaps=stepper.swaps,
            array_size=len(step.array) if step else 0,
            current_step=stepper.current_idx,
            total_steps=stepper.total_steps,
        ),
    }


def no_run():
    return jsonify({"error": "Run an algorithm first"}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    array = get_array()
    state = get_state()
    algo_info = get_algorithm(state["selected_algo"])

    html = render_template_string(INDEX_TEMPLATE,
        svg=render_canvas(array=array),
        playback=playback_controls(speed=state["speed"]),
        algo_selector=algorithm_selector(
            algorithms=list_algorithms(),
            selected_key=state["selected_algo"],
            target=state["target"],
        ),
        array_controls=array_controls(size=len(array)),
        complexity=complexity_panel(algo_info),
        stats=stats_panel(array_size=len(array)),
        analytics=analytics_panel(),
        comparison=comparison_panel(),
        legend=legend_panel(),
        pseudocode=pseudocode_viewer(algo_info.pseudocode if algo_info else []),
        explanation=explanation_panel(),
    )
    return html


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/state")
def api_state():
    stepper = get_stepper()
    state = get_state()
    run = None
    if stepper is not None:
        with stepper.lock:
            run = stepper.snapshot()
    return jsonify({**state, "array": get_array(), "run": run})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    algo_key = json_body().get("algo_key", app.config["DEFAULT_ALGORITHM"])
    algo_info = get_algorithm(algo_key)
    if algo_info is None:
        logger.warning("Unknown algorithm requested: %r", algo_key)
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 404

    set_state(selected_algo=algo_key)
    # the old trace belongs to another algorithm
    save_stepper(None)

    return jsonify({
        "algo_selector": algorithm_selector(
            algorithms=list_algorithms(),
            selected_key=algo_key,
            target=get_state()["target"],
        ),
        "complexity": complexity_panel(algo_info),
        "pseudocode": pseudocode_viewer(algo_info.pseudocode),
    })


@app.route("/api/config/target", methods=["POST"])
def api_config_target():
    try:
        target = int(json_body().get("target"))
    except (TypeError, ValueError):
        return jsonify({"error": "Target must be an integer"}), 400
    set_state(target=target)
    save_stepper(None)
    return jsonify({"target": target})


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = json_body().get("speed", app.config["DEFAULT_SPEED"])
    set_state(speed=speed)

    stepper = get_stepper()
    if stepper is not None:
        with stepper.lock:
            apply_speed(stepper, speed)
    return jsonify({"speed": speed})


# ---------------------------------------------------------------------------
# API: Arrays
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    data = json_body()
    try:
        size = clamp_size(data.get("size", app.config["DEFAULT_ARRAY_SIZE"]))
    except (TypeError, ValueError):
        return jsonify({"error": "Size must be an integer"}), 400

    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        logger.warning("Rejected seed: %r", seed)
        return jsonify({"error": "Seed must be an integer"}), 400

    array = random_array(size, seed=seed)
    set_state(array=array)
    save_stepper(None)
    return jsonify({"array": array, "svg": render_canvas(array=array)})


@app.route("/api/array/import", methods=["POST"])
def api_array_import():
    text = json_body().get("text", "")
    try:
        array = parse_array(text)
    except ValueError as e:
        logger.warning("Rejected array input: %s", e)
        return jsonify({"error": str(e)}), 400

    max_size = app.config["MAX_ARRAY_SIZE"]
    if len(array) > max_size:
        logger.warning("Rejected array input: %d values (max %d)", len(array), max_size)
        return jsonify({"error": f"At most {max_size} values allowed"}), 400

    set_state(array=array)
    save_stepper(None)
    return jsonify({"array": array, "svg": render_canvas(array=array)})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    state = get_state()
    algo_key = state["selected_algo"]
    algo_info = get_algorithm(algo_key)
    if algo_info is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 404

    array = get_array()
    stepper = Stepper()
    apply_speed(stepper, state["speed"])
    stepper.start(generate(algo_key, array, state["target"]))
    save_stepper(stepper)

    logger.info("Built %s trace: %d values, %d steps", algo_key, len(array), stepper.total_steps)
    return jsonify(step_payload(stepper, algo_info))


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
# Every route below holds stepper.lock while it moves the run and
# renders it.  The play timer and the buttons share one run per session.
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    stepper = get_stepper()
    if stepper is None:
        return no_run()
    with stepper.lock:
        if not stepper.next_step():
            return jsonify({"error": "Already at last step", **stepper.snapshot()}), 400
        return jsonify(step_payload(stepper, get_algorithm(get_state()["selected_algo"])))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    stepper = get_stepper()
    if stepper is None:
        return no_run()
    with stepper.lock:
        if not stepper.prev_step():
            return jsonify({"error": "Already at first step", **stepper.snapshot()}), 400
        return jsonify(step_payload(stepper, get_algorithm(get_state()["selected_algo"])))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    stepper = get_stepper()
    if stepper is None:
        return no_run()
    idx = json_body().get("index", 0)
    with stepper.lock:
        if not isinstance(idx, int) or not stepper.goto_step(idx):
            return jsonify({"error": "Invalid step index"}), 400
        logger.debug("Jumped to step %d", idx)
        return jsonify(step_payload(stepper, get_algorithm(get_state()["selected_algo"])))


@app.route("/api/step/reset", methods=["POST"])
def api_step_reset():
    stepper = get_stepper()
    if stepper is None:
        return no_run()
    with stepper.lock:
        stepper.reset()
        return jsonify(step_payload(stepper, get_algorithm(get_state()["selected_algo"])))


@app.route("/api/step/end", methods=["POST"])
def api_step_end():
    stepper = get_stepper()
    if stepper is None:
        return no_run()
    with stepper.lock:
        stepper.jump_to_end()
        return jsonify(step_payload(stepper, get_algorithm(get_state()["selected_algo"])))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    stepper = get_stepper()
    if stepper is None:
        return no_run()
    with stepper.lock:
        stepper.toggle_play()
        return jsonify(stepper.snapshot())


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = json_body()
    array = get_array()
    target = get_state()["target"]

    recorders = []
    for side in ("left", "right"):
        rec = Recorder()
        try:
            rec.start(data.get(side, ""), array, target)
        except ValueError as e:
            return jsonify({"error": str(e)}), 404
        rec.run_to_completion()
        recorders.append(rec)

    result = compare(*recorders)
    return jsonify({
        "left":       recorders[0].get_metrics().__dict__,
        "right":      recorders[1].get_metrics().__dict__,
        "winners": {
            "comparisons": result.winner_comparisons,
            "swaps":       result.winner_swaps,
            "steps":       result.winner_steps,
        },
        "comparison": comparison_panel(result),
        "analytics":  analytics_panel(recorders[0].get_metrics()),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar { width: 340px; background: var(--bg-dark); border-right: 1px solid var(--border); overflow-y: auto; padding: 24px 16px; }
    #main { flex: 1; display: flex; flex-direction: column; overflow-y: auto; padding: 20px; gap: 20px; }
    #canvas-svg { display: flex; justify-content: center; }
    #bottom-panel { display: grid; grid-template-columns: 1fr 1fr; gap: 20px; }

    .panel { background: var(--bg-panel); border: 1px solid var(--border); border-radius: 12px; padding: 18px; margin-bottom: 16px; }
    .panel h3 { font-size: 13px; font-weight: 700; margin-bottom: 14px; text-transform: uppercase; letter-spacing: 0.5px; }
    .placeholder { color: var(--text-secondary); }

    .button-row { display: flex; gap: 8px; margin-bottom: 12px; }
    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff; border: none; padding: 10px 16px; border-radius: 8px;
      cursor: pointer; font-size: 13px; font-weight: 600; margin-top: 8px;
    }
    select, input, textarea { width: 100%; background: var(--bg-darker); color: var(--text-primary); border: 1px solid var(--border); border-radius: 6px; padding: 6px; margin-top: 6px; }

    .code-block { background: var(--bg-darker); border: 1px solid var(--border); border-radius: 8px; padding: 16px; font-family: monospace; font-size: 13px; line-height: 1.6; }
    .code-line { padding: 2px 12px; border-radius: 6px; }
    .code-line.highlight { background: rgba(6, 182, 212, 0.15); border-left: 3px solid var(--accent-cyan); }
    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }

    .progress { background: var(--bg-darker); border-radius: 4px; height: 8px; margin-bottom: 6px; }
    .progress-bar { background: var(--accent-teal); height: 8px; border-radius: 4px; }
    .swatch { display: inline-block; width: 12px; height: 12px; border-radius: 3px; margin-right: 8px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-panel">{{ algo_selector|safe }}</div>
    {{ array_controls|safe }}
    <div id="playback">{{ playback|safe }}</div>
    <div id="stats">{{ stats|safe }}</div>
    {{ legend|safe }}
  </div>

  <div id="main">
    <div id="canvas-svg">{{ svg|safe }}</div>
    <div id="bottom-panel">
      <div>
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div>
        <h3>Explanation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
        <div id="complexity">{{ complexity|safe }}</div>
        <div id="analytics">{{ analytics|safe }}</div>
        <div id="comparison">{{ comparison|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    let timer = null;
    let delayMs = 100;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function show(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.explanation) document.getElementById('explanation').innerHTML = data.explanation;
      if (data.stats) document.getElementById('stats').innerHTML = data.stats;
      if (data.speed) delayMs = data.speed * 1000;
      if (data.current_step !== undefined) document.getElementById('current-step').textContent = data.current_step;
      if (data.total_steps !== undefined) document.getElementById('total-steps').textContent = data.total_steps;
    }

    function stopTimer() {
      if (timer) clearTimeout(timer);
      timer = null;
    }

    async function tick() {
      const data = await post('/api/step/next');
      if (data.error) { stopTimer(); return; }
      show(data);
      if (data.state === 'playing') timer = setTimeout(tick, delayMs);
      else stopTimer();
    }

    document.getElementById('btn-run')?.addEventListener('click', async () => {
      stopTimer();
      show(await post('/api/run'));
    });

    document.getElementById('btn-play')?.addEventListener('click', async () => {
      const data = await post('/api/step/play');
      if (data.state === 'playing') { delayMs = data.speed * 1000; timer = setTimeout(tick, delayMs); }
      else stopTimer();
    });

    document.getElementById('btn-next')?.addEventListener('click', async () => show(await post('/api/step/next')));
    document.getElementById('btn-prev')?.addEventListener('click', async () => show(await post('/api/step/prev')));
    document.getElementById('btn-end')?.addEventListener('click', async () => { stopTimer(); show(await post('/api/step/end')); });
    document.getElementById('btn-reset')?.addEventListener('click', async () => { stopTimer(); show(await post('/api/step/reset')); });

    document.getElementById('algo-selector')?.addEventListener('change', async (e) => {
      stopTimer();
      await post('/api/config/algo', {algo_key: e.target.value});
      // selector, target input and pseudocode all change with the algorithm
      location.reload();
    });

    document.addEventListener('change', async (e) => {
      if (e.target.id === 'target-input') {
        stopTimer();
        await post('/api/config/target', {target: +e.target.value});
      }
    });

    document.getElementById('speed-selector')?.addEventListener('change', async (e) => {
      await post('/api/config/speed', {speed: e.target.value});
    });

    document.getElementById('array-size')?.addEventListener('input', (e) => {
      document.getElementById('array-size-val').textContent = e.target.value;
    });

    document.getElementById('btn-gen-random')?.addEventListener('click', async () => {
      stopTimer();
      const data = await post('/api/array/generate', {size: +document.getElementById('array-size').value});
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
    });

    document.getElementById('btn-import')?.addEventListener('click', async () => {
      stopTimer();
      const data = await post('/api/array/import', {text: document.getElementById('array-text').value});
      if (data.error) { alert(data.error); return; }
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    logger.info("Algorithm Visualizer on http://localhost:%d", app.config["PORT"])
    app.run(debug=True, host=app.config["HOST"], port=app.config["PORT"])
