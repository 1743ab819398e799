"""
canvas.py — SVG Bar Chart Renderer
===================================
Pure rendering function: Step (or plain element list) → SVG string.

One bar per slot, height proportional to the value.  Colour comes from
the element's state; a NORMAL element whose slot is already final is
drawn in the sorted colour.  The slots the step concerns get an outline.

Design decisions:
  - NO mutation.  The caller passes everything in and gets a string back.
  - State-based colouring is a dict lookup: ElementState → hex colour.
  - Negative values grow down from a zero baseline.
"""

from html import escape
from typing import Dict, Iterable, Optional, Sequence, Union

from algorithms.step import Step
from model.element import Element, ElementState


# ---------------------------------------------------------------------------
# Visual Config — colour palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    width:  int = 900
    height: int = 420
    bg:     str = "#0d1117"

    state_colors: Dict[str, str] = {
        "normal":    "#3b82f6",   # blue
        "comparing": "#eab308",   # yellow
        "swapping":  "#ef4444",   # red
        "sorted":    "#10b981",   # green
        "pivot":     "#a855f7",   # purple
        "min":       "#f97316",   # orange
        "max":       "#ec4899",   # pink
    }

    bar_gap:          int = 2
    padding:          int = 20
    focus_stroke:     str = "#e6edf3"
    focus_width:      int = 2
    label_color:      str = "#e6edf3"
    label_size:       int = 11
    max_labelled:     int = 40     # skip value labels when bars get thin
    baseline_color:   str = "#30363d"


CONFIG = CanvasConfig()


def bar_color(element: Element, config: CanvasConfig = CONFIG) -> str:
    state = element.state
    if state == ElementState.NORMAL and element.is_sorted:
        state = ElementState.SORTED
    return config.state_colors.get(state.value, config.state_colors["normal"])


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    source: Union[Step, Sequence[Element], None],
    config: CanvasConfig = CONFIG,
    focus: Optional[Iterable[int]] = None,
) -> str:
    """
    Returns an SVG string.

    Args:
        source : a Step (its array is drawn and its indices outlined), or
                 a plain sequence of Elements, or None for an empty chart.
        config : visual config.
        focus  : slots to outline; defaults to the step's indices.
    """
    if isinstance(source, Step):
        elements = list(source.array)
        if focus is None:
            focus = source.indices
    else:
        elements = list(source or [])
    focused = set(focus or ())

    parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if elements:
        parts.extend(_render_bars(elements, focused, config))

    parts.append("</svg>")
    return "\n".join(parts)


def _render_bars(elements, focused, config: CanvasConfig):
    inner_w = config.width - 2 * config.padding
    inner_h = config.height - 2 * config.padding

    top    = max(0, max(e.value for e in elements))
    bottom = min(0, min(e.value for e in elements))
    span   = (top - bottom) or 1
    scale  = inner_h / span
    zero_y = config.padding + top * scale

    slot_w = inner_w / len(elements)
    bar_w  = max(1.0, slot_w - config.bar_gap)
    labels = len(elements) <= config.max_labelled

    yield (
        f'<line x1="{config.padding}" y1="{zero_y:.1f}" '
        f'x2="{config.width - config.padding}" y2="{zero_y:.1f}" '
        f'stroke="{config.baseline_color}" stroke-width="1"/>'
    )

    for i, e in enumerate(elements):
        x = config.padding + i * slot_w
        h = abs(e.value) * scale
        y = zero_y - h if e.value >= 0 else zero_y
        stroke = ""
        if i in focused:
            stroke = f' stroke="{config.focus_stroke}" stroke-width="{config.focus_width}"'
        yield (
            f'<rect class="bar" data-index="{i}" data-id="{escape(e.id)}" '
            f'x="{x:.1f}" y="{y:.1f}" width="{bar_w:.1f}" height="{max(h, 1.0):.1f}" '
            f'fill="{bar_color(e, config)}" rx="2"{stroke}/>'
        )
        if labels:
            label_y = y - 4 if e.value >= 0 else y + h + config.label_size
            yield (
                f'<text x="{x + bar_w / 2:.1f}" y="{label_y:.1f}" text-anchor="middle" '
                f'fill="{config.label_color}" font-size="{config.label_size}">{e.value}</text>'
            )
