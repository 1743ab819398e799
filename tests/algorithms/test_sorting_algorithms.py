import random

import pytest

from algorithms import REGISTRY, get_algorithm
from algorithms.step import StepType
from model.element import Element, wrap

ALL_KEYS = list(REGISTRY)
STABLE_KEYS = [k for k, info in REGISTRY.items() if info.stable]
SCENARIO = [64, 34, 25, 12, 22, 11, 90]


def run(key: str, values, delay: int = 0):
    return list(get_algorithm(key).fn(wrap(values), delay))


def random_values(size: int, seed: int) -> list[int]:
    rng = random.Random(seed)
    # narrow range so larger inputs always carry duplicates
    return [rng.randint(1, max(1, size // 2)) for _ in range(size)]


def test_catalogue_lists_ten_algorithms_with_stability() -> None:
    assert len(REGISTRY) == 10
    assert sorted(STABLE_KEYS) == [
        "bubble_sort",
        "bucket_sort",
        "counting_sort",
        "insertion_sort",
        "merge_sort",
        "radix_sort",
    ]


@pytest.mark.parametrize("key", ALL_KEYS)
@pytest.mark.parametrize("size", [2, 5, 50, 100])
def test_final_snapshot_is_sorted_permutation(key: str, size: int) -> None:
    values = random_values(size, seed=size)
    steps = run(key, values)

    final = steps[-1]
    assert final.type == StepType.SORTED
    assert final.values == sorted(values)
    assert all(e.is_sorted for e in final.array)


@pytest.mark.parametrize("key", ALL_KEYS)
def test_empty_input_yields_no_steps(key: str) -> None:
    assert run(key, []) == []


@pytest.mark.parametrize("key", ALL_KEYS)
def test_single_element_yields_one_sorted_step(key: str) -> None:
    steps = run(key, [42])

    assert len(steps) == 1
    assert steps[0].type == StepType.SORTED
    assert steps[0].values == [42]
    assert steps[0].array[0].is_sorted


@pytest.mark.parametrize("key", ALL_KEYS)
def test_concrete_scenario(key: str) -> None:
    steps = run(key, SCENARIO)
    assert steps[-1].values == [11, 12, 22, 25, 34, 64, 90]


@pytest.mark.parametrize("key", ALL_KEYS)
def test_only_the_last_step_is_terminal(key: str) -> None:
    steps = run(key, SCENARIO)
    assert [s.type for s in steps].count(StepType.SORTED) == 1


@pytest.mark.parametrize("key", STABLE_KEYS)
def test_stable_algorithms_keep_equal_values_in_input_order(key: str) -> None:
    values = [5, 3, 5, 1, 3, 5, 2, 1, 3, 2, 5, 1]
    elements = wrap(values)
    order = {e.id: i for i, e in enumerate(elements)}

    steps = list(get_algorithm(key).fn(elements, 0))
    final = steps[-1].array

    for a, b in zip(final, final[1:]):
        if a.value == b.value:
            assert order[a.id] < order[b.id]


@pytest.mark.parametrize("key", ALL_KEYS)
def test_snapshots_are_full_length_and_settled_slots_stay_settled(key: str) -> None:
    values = random_values(30, seed=3)
    steps = run(key, values)

    for step in steps:
        assert len(step.array) == len(values)
    for prev, nxt in zip(steps, steps[1:]):
        for i in range(len(values)):
            if prev.array[i].is_sorted:
                assert nxt.array[i].is_sorted


@pytest.mark.parametrize("key", ALL_KEYS)
def test_step_delay_is_the_requested_speed(key: str) -> None:
    steps = run(key, SCENARIO, delay=250)
    assert {s.delay for s in steps} == {250}


def test_snapshots_do_not_share_elements() -> None:
    steps = run("bubble_sort", SCENARIO)

    assert steps[0].values == SCENARIO
    assert steps[0].array[0] is not steps[1].array[0]
    steps[0].array[0].value = -1
    assert steps[1].array[0].value == 64


def test_bubble_sort_compares_and_swaps_before_finishing() -> None:
    steps = run("bubble_sort", SCENARIO)
    kinds = [s.type for s in steps[:-1]]

    assert StepType.COMPARE in kinds
    assert StepType.SWAP in kinds


def test_bubble_sort_swap_step_shows_the_pair_before_exchange() -> None:
    steps = run("bubble_sort", [2, 1])
    swap = next(s for s in steps if s.type == StepType.SWAP)

    assert swap.indices == (0, 1)
    assert swap.values == [2, 1]


def test_bubble_sort_exits_early_on_sorted_input() -> None:
    steps = run("bubble_sort", [1, 2, 3, 4, 5])

    assert not any(s.type == StepType.SWAP for s in steps)
    assert sum(1 for s in steps if s.type == StepType.COMPARE) == 4


def test_selection_sort_marks_the_front_as_it_goes() -> None:
    steps = run("selection_sort", [3, 1, 2])
    first_settled = next(s for s in steps if s.array[0].is_sorted)

    assert first_settled.array[0].value == 1


def test_insertion_sort_uses_moves_not_swaps() -> None:
    kinds = {s.type for s in run("insertion_sort", SCENARIO)}

    assert StepType.MOVE in kinds
    assert StepType.SWAP not in kinds


def test_shell_sort_settles_nothing_before_the_end() -> None:
    steps = run("shell_sort", SCENARIO)

    for step in steps[:-1]:
        assert not any(e.is_sorted for e in step.array)


def test_quick_sort_highlights_a_pivot() -> None:
    steps = run("quick_sort", SCENARIO)
    assert any(e.state.value == "pivot" for s in steps for e in s.array)


def test_heap_sort_settles_the_maximum_first() -> None:
    steps = run("heap_sort", SCENARIO)
    first_settled = next(s for s in steps if any(e.is_sorted for e in s.array))

    settled = [e for e in first_settled.array if e.is_sorted]
    assert [e.value for e in settled] == [90]
    assert first_settled.array[-1].is_sorted


def test_merge_sort_merges_ties_from_the_left() -> None:
    elements = wrap([2, 1, 2, 1])
    left_two, left_one = elements[0].id, elements[1].id

    final = list(get_algorithm("merge_sort").fn(elements, 0))[-1].array
    assert [e.id for e in final if e.value == 2][0] == left_two
    assert [e.id for e in final if e.value == 1][0] == left_one


def test_counting_sort_handles_negative_values() -> None:
    values = [3, -2, 0, -2, 5, -7]
    assert run("counting_sort", values)[-1].values == sorted(values)


def test_radix_sort_handles_negative_values() -> None:
    values = [-5, 3, -12, 0, 7, -5, 120]
    assert run("radix_sort", values)[-1].values == sorted(values)


def test_bucket_sort_with_all_equal_values() -> None:
    elements = wrap([7, 7, 7, 7])
    ids = [e.id for e in elements]

    final = list(get_algorithm("bucket_sort").fn(elements, 0))[-1].array
    assert [e.value for e in final] == [7, 7, 7, 7]
    assert [e.id for e in final] == ids


def test_elements_passed_in_keep_their_identity() -> None:
    source = [Element(value=v, position=i) for i, v in enumerate([3, 1, 2])]
    final = run("insertion_sort", source)[-1].array

    assert {e.id for e in final} == {e.id for e in source}
