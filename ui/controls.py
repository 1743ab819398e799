"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – play/pause/next/prev/rewind/speed
  • algorithm_selector  – dropdown with complexity and stability
  • array_generator     – array kind, size and optional range
  • statistics_panel    – comparisons, swaps, moves, steps, time
  • pseudocode_viewer   – with optional line highlighting
  • explanation_panel   – description of the current step

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import List, Optional

from algorithms import AlgoInfo
from engine.recorder import RunMetrics
from engine.stepper import SortStatistics, SPEED_PRESETS
from model.generator import ArrayKind


MIN_ARRAY_SIZE = 5
MAX_ARRAY_SIZE = 100


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    speed: str = "medium",
    is_finished: bool = False,
) -> str:
    play_icon  = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"

    options = "".join(
        f'<option value="{name}" {"selected" if name == speed else ""}>'
        f'{name.capitalize()} ({int(seconds * 1000)} ms)</option>'
        for name, seconds in SPEED_PRESETS.items()
    )

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-rewind" title="Rewind to start">⏮</button>
        <button id="btn-prev" title="Previous step">◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Next step">▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
        <button id="btn-stop" title="Stop the run">⏹</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">SORTED</span>' if is_finished else ''}
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">{options}</select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "bubble_sort") -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.complexity_average}</option>'
        )

    card = ""
    selected = next((a for a in algorithms if a.key == selected_key), None)
    if selected is not None:
        card = f"""
      <table class="algo-card">
        <tr><td>Best:</td><td>{selected.complexity_best}</td></tr>
        <tr><td>Average:</td><td>{selected.complexity_average}</td></tr>
        <tr><td>Worst:</td><td>{selected.complexity_worst}</td></tr>
        <tr><td>Space:</td><td>{selected.complexity_space}</td></tr>
        <tr><td>Stable:</td><td>{'yes' if selected.stable else 'no'}</td></tr>
        <tr><td>Kind:</td><td>{', '.join(selected.tags)}</td></tr>
      </table>
      <p class="algo-description">{escape(selected.description)}</p>"""

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector">
        {''.join(options)}
      </select>{card}
      <button id="btn-run" class="btn-primary">▶ Run Algorithm</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Generator
# ---------------------------------------------------------------------------
def array_generator(kind: str = ArrayKind.RANDOM.value, size: int = 20) -> str:
    options = "".join(
        f'<option value="{k.value}" {"selected" if k.value == kind else ""}>'
        f'{k.value.replace("_", " ").capitalize()}</option>'
        for k in ArrayKind
    )
    return f"""
    <div class="panel array-generator">
      <h3>🎲 Array</h3>
      <label>Kind: <select id="array-kind">{options}</select></label>
      <label>Size: <input type="range" id="array-size" min="{MIN_ARRAY_SIZE}" max="{MAX_ARRAY_SIZE}"
             value="{size}"> <span id="array-size-val">{size}</span></label>
      <div class="range-inputs" style="display: {'block' if kind == ArrayKind.RANDOM_RANGE.value else 'none'};">
        <label>Low: <input type="number" id="array-low" value="1"></label>
        <label>High: <input type="number" id="array-high" value="100"></label>
      </div>
      <button id="btn-generate" class="btn-secondary">Generate</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Statistics Panel
# ---------------------------------------------------------------------------
def statistics_panel(
    stats: Optional[SortStatistics] = None,
    metrics: Optional[RunMetrics] = None,
) -> str:
    if stats is None and metrics is None:
        return """
        <div class="panel statistics-panel">
          <h3>📊 Statistics</h3>
          <p class="placeholder">Run an algorithm to see statistics.</p>
        </div>
        """

    if stats is None:
        stats = SortStatistics(
            comparisons=metrics.comparisons,
            swaps=metrics.swaps,
            moves=metrics.moves,
            steps=metrics.total_steps,
            completed=metrics.completed,
        )

    extra = ""
    if metrics is not None:
        status = "⏹ Stopped" if metrics.stopped else ("✅ Sorted" if metrics.completed else "…")
        extra = f"""
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Memory:</td><td><strong>{metrics.memory_bytes // 1024} KB</strong></td></tr>
        <tr><td>Status:</td><td><strong>{status}</strong></td></tr>"""

    title = f" — {metrics.algo_label}" if metrics is not None else ""
    return f"""
    <div class="panel statistics-panel">
      <h3>📊 Statistics{title}</h3>
      <table>
        <tr><td>Comparisons:</td><td><strong>{stats.comparisons}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{stats.swaps}</strong></td></tr>
        <tr><td>Moves:</td><td><strong>{stats.moves}</strong></td></tr>
        <tr><td>Steps:</td><td><strong>{stats.steps}</strong></td></tr>{extra}
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
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
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
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(description: str = "") -> str:
    if not description:
        return ('<div class="explanation-text">▶ Click <strong>Run Algorithm</strong> '
                'to see what happens at each step.</div>')
    return f'<div class="explanation-text">{escape(description)}</div>'
