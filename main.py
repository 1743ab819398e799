"""
main.py — Sorting Algorithm Visualizer Flask App
=================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  POST /api/array/generate     – generate a new input array
  POST /api/run                – start a sort in a background thread
  POST /api/pause              – pause the active sort
  POST /api/resume             – resume it
  POST /api/stop               – stop it
  POST /api/reset              – stop everything, back to idle
  GET  /api/state              – current run state (for polling)
  GET  /api/step/<index>       – one recorded step of the latest run
  GET  /api/steps/saved        – steps of the last completed run, from disk
  GET  /api/algorithms         – catalogue with complexity / stability
  POST /api/replay/<action>    – step through the latest run: next, prev,
                                goto, rewind, end, play, tick, speed

State management:
  One executor per process, so the state is module-level rather than
  per-session.  A run executes on a worker thread; routes only read the
  recorder's growing step list and steer the executor.  When a run ends
  its steps are loaded into a server-side Stepper for replay.

Configuration (environment):
  SORTVIZ_STORE  path of the JSON step store   (default: last_run.json)
  SORTVIZ_HOST   bind address                  (default: 0.0.0.0)
  SORTVIZ_PORT   port                          (default: 5000)
"""

from flask import Flask, render_template_string, request, jsonify
import logging
import threading
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import list_algorithms
from algorithms.step import DEFAULT_DELAY_MS
from engine import (
    AlgorithmRegistry,
    SortingExecutor,
    StepStore,
    Recorder,
    SortingError,
    SortInProgress,
    SortStopped,
    PersistenceFailure,
    Stepper,
    SPEED_PRESETS,
    tally,
)
from model.element import wrap
from model.generator import ArrayKind, generate
from ui import (
    MIN_ARRAY_SIZE,
    MAX_ARRAY_SIZE,
    render_bars,
    playback_controls,
    algorithm_selector,
    array_generator,
    statistics_panel,
    pseudocode_viewer,
    explanation_panel,
)


logger = logging.getLogger(__name__)

MIN_SPEED_MS = 100
MAX_SPEED_MS = 2000
DEFAULT_SIZE = 20

app = Flask(__name__)

registry = AlgorithmRegistry()
store    = StepStore(os.environ.get("SORTVIZ_STORE", "last_run.json"))
executor = SortingExecutor(registry, store=store)
replay   = Stepper(use_step_delay=False)     # guarded by _lock

_lock  = threading.Lock()
_state = {
    "values":    generate(ArrayKind.RANDOM, DEFAULT_SIZE),
    "algorithm": "bubble_sort",
    "speed":     DEFAULT_DELAY_MS,
    "recorder":  None,
    "worker":    None,
    "error":     None,
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _status_for(exc: SortingError) -> int:
    if isinstance(exc, SortInProgress):
        return 409
    if isinstance(exc, PersistenceFailure):
        return 500
    return 400


@app.errorhandler(SortingError)
def handle_sorting_error(exc: SortingError):
    return jsonify({"error": str(exc), "kind": exc.kind}), _status_for(exc)


def _int_arg(data: dict, name: str, default=None):
    """Integer field of a JSON body; `default` when missing or unparsable."""
    value = data.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _run_worker(rec: Recorder, reservation: int) -> None:
    error = None
    try:
        metrics = rec.run_to_completion(reservation)
    except SortingError as exc:
        logger.warning("run failed: %s", exc)
        error = exc.to_dict()
    else:
        if metrics.stopped:
            error = SortStopped(rec.steps, metrics.algo_key).to_dict()

    with _lock:
        # a reset or a newer run owns the state now
        if _state["recorder"] is not rec:
            return
        _state["error"] = error
        replay.start(rec.steps)
        replay.jump_to_end()


def _frame(steps, index: int) -> dict:
    step = steps[index]
    return {
        "index":       index,
        "total_steps": len(steps),
        "step":        step.to_dict(),
        "svg":         render_bars(step),
        "explanation": explanation_panel(step.description),
        "statistics":  tally(steps[: index + 1]).to_dict(),
    }


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    with _lock:
        values    = list(_state["values"])
        algo_key  = _state["algorithm"]
        speed_ms  = _state["speed"]

    info = registry.info(algo_key)
    html = render_template_string(
        INDEX_TEMPLATE,
        svg=render_bars(wrap(values)),
        playback=playback_controls(),
        algo_selector=algorithm_selector(list_algorithms(), selected_key=algo_key),
        array_gen=array_generator(size=len(values)),
        statistics=statistics_panel(),
        pseudocode=pseudocode_viewer(info.pseudocode),
        explanation=explanation_panel(),
        speed=speed_ms,
        min_speed=MIN_SPEED_MS,
        max_speed=MAX_SPEED_MS,
    )
    return html


# ---------------------------------------------------------------------------
# API: Arrays & Catalogue
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    data = request.get_json(silent=True) or {}
    size = clamp(_int_arg(data, "size", DEFAULT_SIZE), MIN_ARRAY_SIZE, MAX_ARRAY_SIZE)

    kind = data.get("kind", ArrayKind.RANDOM.value)
    if kind not in {k.value for k in ArrayKind}:
        return jsonify({"error": f"unknown array kind {kind!r}", "kind": "invalid_array_kind"}), 400

    values = generate(
        kind,
        size,
        low=_int_arg(data, "low"),
        high=_int_arg(data, "high"),
        seed=_int_arg(data, "seed"),
    )
    with _lock:
        _state["values"] = values

    return jsonify({"values": values, "svg": render_bars(wrap(values))})


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({
        "algorithms": [
            {
                "key":         a.key,
                "label":       a.label,
                "tags":        a.tags,
                "stable":      a.stable,
                "best":        a.complexity_best,
                "average":     a.complexity_average,
                "worst":       a.complexity_worst,
                "space":       a.complexity_space,
                "description": a.description,
                "pseudocode":  a.pseudocode,
            }
            for a in list_algorithms()
        ],
        "comparison":     registry.comparison_algorithms(),
        "non_comparison": registry.non_comparison_algorithms(),
    })


# ---------------------------------------------------------------------------
# API: Run & Steering
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = request.get_json(silent=True) or {}

    with _lock:
        algo_key = data.get("algorithm", _state["algorithm"])
        speed    = clamp(_int_arg(data, "speed", _state["speed"]), MIN_SPEED_MS, MAX_SPEED_MS)
        values   = data.get("values", _state["values"])

    try:
        values = [int(v) for v in values]
    except (TypeError, ValueError):
        return jsonify({"error": "values must be integers", "kind": "invalid_values"}), 400

    rec = Recorder(executor)
    rec.start(algo_key, values, animation_speed=speed, pace=bool(data.get("pace", True)))

    with _lock:
        busy = _state["worker"] is not None and _state["worker"].is_alive()
        if busy:
            raise SortInProgress(executor.active_algorithm or algo_key)
        # claimed here so a stop sent right after the 202 reaches the run
        reservation = executor.reserve(algo_key)
        worker = threading.Thread(target=_run_worker, args=(rec, reservation), daemon=True)
        _state.update(algorithm=algo_key, speed=speed, values=values,
                      recorder=rec, worker=worker, error=None)
        replay.reset()
        worker.start()
    logger.info("started %s on %d value(s) at %d ms", algo_key, len(values), speed)

    return jsonify({"running": True, "algorithm": algo_key, "speed": speed}), 202


@app.route("/api/pause", methods=["POST"])
def api_pause():
    executor.pause()
    return jsonify({"paused": executor.is_paused})


@app.route("/api/resume", methods=["POST"])
def api_resume():
    executor.resume()
    return jsonify({"paused": executor.is_paused})


@app.route("/api/stop", methods=["POST"])
def api_stop():
    executor.stop()
    return jsonify({"stopping": True})


@app.route("/api/reset", methods=["POST"])
def api_reset():
    executor.reset()
    with _lock:
        _state.update(recorder=None, worker=None, error=None)
        replay.reset()
    return jsonify({"executing": executor.is_executing})


# ---------------------------------------------------------------------------
# API: State & Steps
# ---------------------------------------------------------------------------
@app.route("/api/state")
def api_state():
    with _lock:
        rec   = _state["recorder"]
        error = _state["error"]
        algo  = _state["algorithm"]

    steps   = list(rec.steps) if rec is not None else []
    metrics = rec.metrics if rec is not None else None
    payload = {
        "executing":   executor.is_executing,
        "paused":      executor.is_paused,
        "algorithm":   executor.active_algorithm or algo,
        "total_steps": len(steps),
        "finished":    metrics is not None and metrics.completed and not metrics.stopped,
        "stopped":     metrics is not None and metrics.stopped,
        "metrics":     dict(metrics.__dict__) if metrics else None,
        "error":       error,
        "statistics":  statistics_panel(tally(steps), metrics) if steps else statistics_panel(),
    }
    if steps:
        payload.update(_frame(steps, len(steps) - 1))
    return jsonify(payload)


@app.route("/api/step/<int:index>")
def api_step(index: int):
    with _lock:
        rec = _state["recorder"]
    steps = list(rec.steps) if rec is not None else []
    if not 0 <= index < len(steps):
        return jsonify({"error": f"no step {index}", "kind": "step_out_of_range"}), 404
    return jsonify(_frame(steps, index))


@app.route("/api/steps/saved")
def api_steps_saved():
    steps = store.load()
    return jsonify({
        "total_steps": len(steps),
        "steps":       [s.to_dict() for s in steps],
    })


# ---------------------------------------------------------------------------
# API: Replay (server-side Stepper over the latest run)
# ---------------------------------------------------------------------------
def _replay_payload(**extra) -> dict:
    """Current replay frame.  Caller holds `_lock`."""
    payload = {
        "playing":     replay.is_playing,
        "finished":    replay.is_finished,
        "total_steps": replay.total_steps,
        "index":       replay.current_idx,
    }
    if replay.current_step is not None:
        payload.update(_frame(replay.steps, replay.current_idx))
    payload.update(extra)
    return payload


def _edge_error(message: str):
    return jsonify({"error": message, "kind": "step_out_of_range"}), 400


@app.route("/api/replay/next", methods=["POST"])
def api_replay_next():
    with _lock:
        if not replay.next_step():
            return _edge_error("Already at last step")
        return jsonify(_replay_payload())


@app.route("/api/replay/prev", methods=["POST"])
def api_replay_prev():
    with _lock:
        if not replay.prev_step():
            return _edge_error("Already at first step")
        return jsonify(_replay_payload())


@app.route("/api/replay/goto", methods=["POST"])
def api_replay_goto():
    data = request.get_json(silent=True) or {}
    idx  = _int_arg(data, "index", 0)
    with _lock:
        if not replay.goto_step(idx):
            return _edge_error("Invalid step index")
        return jsonify(_replay_payload())


@app.route("/api/replay/rewind", methods=["POST"])
def api_replay_rewind():
    with _lock:
        replay.rewind()
        return jsonify(_replay_payload())


@app.route("/api/replay/end", methods=["POST"])
def api_replay_end():
    with _lock:
        replay.jump_to_end()
        return jsonify(_replay_payload())


@app.route("/api/replay/play", methods=["POST"])
def api_replay_play():
    with _lock:
        replay.toggle_play()
        return jsonify(_replay_payload())


@app.route("/api/replay/tick", methods=["POST"])
def api_replay_tick():
    with _lock:
        advanced = replay.tick()
        return jsonify(_replay_payload(advanced=advanced))


@app.route("/api/replay/speed", methods=["POST"])
def api_replay_speed():
    data   = request.get_json(silent=True) or {}
    preset = data.get("preset", "medium")
    if preset not in SPEED_PRESETS:
        return jsonify({"error": f"unknown speed {preset!r}", "kind": "invalid_speed"}), 400
    with _lock:
        replay.set_speed(preset)
        return jsonify({"preset": preset, "interval": replay.interval})


INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent: #3b82f6;
    }
    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
    }
    #sidebar { width: 320px; overflow-y: auto; padding: 20px 14px; border-right: 1px solid var(--border); }
    #main { flex: 1; display: flex; flex-direction: column; }
    #canvas-container { flex: 1; display: flex; align-items: center; justify-content: center; }
    #bottom-panel { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; padding: 16px;
                    border-top: 1px solid var(--border); min-height: 240px; }
    .panel { background: var(--bg-panel); border: 1px solid var(--border); border-radius: 10px;
             padding: 14px; margin-bottom: 14px; }
    .panel h3 { font-size: 13px; text-transform: uppercase; margin-bottom: 10px; }
    .button-row { display: flex; gap: 6px; margin-bottom: 10px; }
    button { background: var(--accent); color: #fff; border: none; padding: 8px 12px;
             border-radius: 6px; cursor: pointer; }
    select, input { background: var(--bg-dark); color: var(--text-primary);
                    border: 1px solid var(--border); border-radius: 4px; padding: 4px; }
    label { display: block; margin: 6px 0; color: var(--text-secondary); }
    .code-block { font-family: monospace; font-size: 13px; line-height: 1.6; }
    .code-line.highlight { border-left: 3px solid var(--accent); padding-left: 6px; }
    .explanation-text { color: var(--text-secondary); line-height: 1.8; }
    .finished-badge { color: #10b981; font-weight: 700; }
    .error { color: #ef4444; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="algo-panel">{{ algo_selector | safe }}</div>
    {{ array_gen | safe }}
    <div class="panel">
      <h3>⏱ Animation speed</h3>
      <input type="range" id="run-speed" min="{{ min_speed }}" max="{{ max_speed }}" step="50" value="{{ speed }}">
      <span id="run-speed-val">{{ speed }}</span> ms
    </div>
    <div class="panel">
      <div class="button-row">
        <button id="btn-pause">Pause</button>
        <button id="btn-resume">Resume</button>
        <button id="btn-reset">Reset</button>
      </div>
      <div id="run-error" class="error"></div>
    </div>
    {{ playback | safe }}
    <div id="statistics">{{ statistics | safe }}</div>
  </div>
  <div id="main">
    <div id="canvas-container">{{ svg | safe }}</div>
    <div id="bottom-panel">
      <div id="pseudocode">{{ pseudocode | safe }}</div>
      <div id="explanation">{{ explanation | safe }}</div>
    </div>
  </div>

  <script>
    let polling = null, playing = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return res.json();
    }

    function show(frame) {
      document.getElementById('canvas-container').innerHTML = frame.svg;
      document.getElementById('explanation').innerHTML = frame.explanation;
      document.getElementById('current-step').textContent = frame.index + 1;
      document.getElementById('total-steps').textContent = frame.total_steps;
    }

    async function poll() {
      const state = await (await fetch('/api/state')).json();
      document.getElementById('statistics').innerHTML = state.statistics;
      document.getElementById('run-error').textContent = state.error ? state.error.error : '';
      if (state.svg) show(state);
      if (!state.executing) { clearInterval(polling); polling = null; }
    }

    document.getElementById('btn-run').addEventListener('click', async () => {
      const data = await post('/api/run', {
        algorithm: document.getElementById('algo-selector').value,
        speed: parseInt(document.getElementById('run-speed').value),
      });
      if (data.error) { document.getElementById('run-error').textContent = data.error; return; }
      if (!polling) polling = setInterval(poll, 150);
    });

    document.getElementById('btn-generate').addEventListener('click', async () => {
      const data = await post('/api/array/generate', {
        kind: document.getElementById('array-kind').value,
        size: parseInt(document.getElementById('array-size').value),
        low: document.getElementById('array-low').value,
        high: document.getElementById('array-high').value,
      });
      if (data.error) { document.getElementById('run-error').textContent = data.error; return; }
      document.getElementById('canvas-container').innerHTML = data.svg;
    });

    document.getElementById('array-size').addEventListener('input', (e) => {
      document.getElementById('array-size-val').textContent = e.target.value;
    });
    document.getElementById('run-speed').addEventListener('input', (e) => {
      document.getElementById('run-speed-val').textContent = e.target.value;
    });
    document.getElementById('array-kind').addEventListener('change', (e) => {
      document.querySelector('.range-inputs').style.display =
        e.target.value === 'random_range' ? 'block' : 'none';
    });

    document.getElementById('btn-pause').addEventListener('click', () => post('/api/pause'));
    document.getElementById('btn-resume').addEventListener('click', () => post('/api/resume'));
    document.getElementById('btn-stop').addEventListener('click', () => post('/api/stop'));
    document.getElementById('btn-reset').addEventListener('click', () => post('/api/reset'));

    async function replay(action, data) {
      const frame = await post('/api/replay/' + action, data);
      if (frame.svg) show(frame);
      return frame;
    }

    document.getElementById('btn-prev').addEventListener('click', () => replay('prev'));
    document.getElementById('btn-next').addEventListener('click', () => replay('next'));
    document.getElementById('btn-rewind').addEventListener('click', () => replay('rewind'));
    document.getElementById('btn-end').addEventListener('click', () => replay('end'));
    document.getElementById('speed-selector').addEventListener('change', (e) =>
      post('/api/replay/speed', {preset: e.target.value}));
    document.getElementById('btn-play').addEventListener('click', async () => {
      const frame = await replay('play');
      if (!frame.playing) { clearInterval(playing); playing = null; return; }
      if (!playing) playing = setInterval(async () => {
        const tick = await replay('tick');
        if (!tick.playing) { clearInterval(playing); playing = null; }
      }, 50);
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host = os.environ.get("SORTVIZ_HOST", "0.0.0.0")
    port = int(os.environ.get("SORTVIZ_PORT", "5000"))
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://localhost:{port}")
    print("=" * 60)
    app.run(debug=True, host=host, port=port, threaded=True)
