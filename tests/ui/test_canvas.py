from algorithms import get_algorithm
from model.element import Element, ElementState, wrap
from ui.canvas import CONFIG, bar_color, render_bars


def test_one_bar_per_element() -> None:
    svg = render_bars(wrap([5, 3, 9]))

    assert svg.startswith("<svg")
    assert svg.rstrip().endswith("</svg>")
    assert svg.count('class="bar"') == 3


def test_empty_chart() -> None:
    svg = render_bars(None)
    assert 'class="bar"' not in svg


def test_step_indices_are_outlined() -> None:
    steps = list(get_algorithm("bubble_sort").fn(wrap([2, 1]), 0))
    compare = next(s for s in steps if s.type.value == "compare")

    svg = render_bars(compare)

    assert svg.count(f'stroke="{CONFIG.focus_stroke}"') == 2


def test_colours_follow_state_and_settled_flag() -> None:
    assert bar_color(Element(1, 0)) == CONFIG.state_colors["normal"]
    assert bar_color(Element(1, 0, ElementState.PIVOT)) == CONFIG.state_colors["pivot"]
    assert bar_color(Element(1, 0, is_sorted=True)) == CONFIG.state_colors["sorted"]


def test_negative_values_render() -> None:
    svg = render_bars(wrap([-4, 0, 6]))
    assert svg.count('class="bar"') == 3
    assert ">-4</text>" in svg
