from algorithms.step import DEFAULT_DELAY_MS, Step, StepBuilder, StepType
from model.element import ElementState, wrap


def test_exchange_keeps_settled_flag_with_the_slot() -> None:
    sb = StepBuilder(wrap([1, 2, 3]))
    sb.mark_sorted(2)

    sb.exchange(0, 2)

    assert [e.value for e in sb.elements] == [3, 2, 1]
    assert [e.is_sorted for e in sb.elements] == [False, False, True]
    assert [e.position for e in sb.elements] == [0, 1, 2]


def test_place_copies_and_never_unsettles_a_slot() -> None:
    sb = StepBuilder(wrap([5, 6]))
    sb.mark_sorted(0)
    incoming = sb.elements[1]

    sb.place(0, incoming)

    assert sb.elements[0] is not incoming
    assert sb.elements[0].id == incoming.id
    assert sb.elements[0].position == 0
    assert sb.elements[0].is_sorted


def test_snapshot_is_detached_from_the_working_array() -> None:
    sb = StepBuilder(wrap([4, 2]))
    step = sb.compare([0, 1], "Compare 4 and 2")

    sb.exchange(0, 1)
    sb.set_state(ElementState.SWAPPING, 0)

    assert step.values == [4, 2]
    assert step.array[0].state == ElementState.NORMAL


def test_finish_settles_everything() -> None:
    sb = StepBuilder(wrap([3, 1]), delay=120)
    step = sb.finish("done")

    assert step.type == StepType.SORTED
    assert step.indices == ()
    assert step.delay == 120
    assert all(e.is_sorted and e.state == ElementState.SORTED for e in step.array)


def test_trivial_steps() -> None:
    assert list(StepBuilder([]).trivial()) == []

    steps = list(StepBuilder(wrap([9])).trivial("Heap sort"))
    assert len(steps) == 1
    assert steps[0].type == StepType.SORTED
    assert steps[0].description.startswith("Heap sort")


def test_step_dict_round_trip_keeps_every_field() -> None:
    sb = StepBuilder(wrap([3, 1, 2]), delay=300)
    sb.mark_sorted(1)
    sb.set_state(ElementState.PIVOT, 2)
    step = sb.swap([0, 2], "Swap 3 and 2")

    restored = Step.from_dict(step.to_dict())

    assert restored == step
    assert [e.to_dict() for e in restored.array] == [e.to_dict() for e in step.array]


def test_step_defaults() -> None:
    step = Step(type=StepType.HIGHLIGHT)
    assert step.indices == ()
    assert step.array == ()
    assert step.delay == DEFAULT_DELAY_MS
