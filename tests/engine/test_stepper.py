from algorithms import get_algorithm
from algorithms.step import StepType
from engine.stepper import SPEED_PRESETS, Stepper, StepperState, tally
from model.element import wrap


def bubble_steps(delay: int = 0):
    return list(get_algorithm("bubble_sort").fn(wrap([3, 1, 2]), delay))


def test_start_shows_the_first_step() -> None:
    seen = []
    stepper = Stepper(on_step=seen.append)
    steps = bubble_steps()

    stepper.start(steps)

    assert stepper.state == StepperState.PAUSED
    assert stepper.current_step is steps[0]
    assert seen == [steps[0]]
    assert stepper.total_steps == len(steps)


def test_navigation() -> None:
    stepper = Stepper()
    steps = bubble_steps()
    stepper.start(steps)

    assert stepper.prev_step() is False
    assert stepper.next_step() is True
    assert stepper.current_idx == 1
    assert stepper.goto_step(4) is True
    assert stepper.current_step is steps[4]
    assert stepper.goto_step(len(steps)) is False

    stepper.jump_to_end()
    assert stepper.is_finished
    assert stepper.current_step.type == StepType.SORTED
    assert stepper.next_step() is False

    stepper.rewind()
    assert stepper.current_idx == 0
    assert stepper.state == StepperState.PAUSED


def test_tick_advances_only_while_playing() -> None:
    stepper = Stepper()
    steps = bubble_steps(delay=0)
    stepper.start(steps)

    assert stepper.tick() is False
    stepper.play()
    assert stepper.is_playing
    assert stepper.tick() is True
    assert stepper.current_idx == 1

    stepper.toggle_play()
    assert stepper.tick() is False


def test_playing_runs_to_finished() -> None:
    stepper = Stepper()
    steps = bubble_steps(delay=0)
    stepper.start(steps)
    stepper.play()

    while stepper.tick():
        pass

    assert stepper.is_finished
    assert stepper.current_idx == len(steps) - 1


def test_tick_waits_for_the_step_delay() -> None:
    stepper = Stepper()
    stepper.start(bubble_steps(delay=500))
    stepper.play()

    assert stepper.interval == 0.5
    assert stepper.tick() is False


def test_speed_presets_override_step_delay() -> None:
    stepper = Stepper()
    stepper.start(bubble_steps(delay=500))

    stepper.set_speed("turbo")
    assert stepper.interval == SPEED_PRESETS["turbo"]
    stepper.set_speed("no-such-preset")
    assert stepper.interval == SPEED_PRESETS["medium"]
    stepper.set_speed_value(0.0)
    assert stepper.interval == 0.02


def test_statistics_cover_the_steps_shown_so_far() -> None:
    stepper = Stepper()
    steps = bubble_steps()
    stepper.start(steps)

    assert stepper.statistics.comparisons == 0
    stepper.jump_to_end()
    stats = stepper.statistics

    assert stats == tally(steps)
    assert stats.completed
    assert stats.comparisons > 0
    assert stats.swaps > 0
    assert stats.steps == len(steps)


def test_empty_step_list_is_finished_at_once() -> None:
    stepper = Stepper()
    stepper.start([])

    assert stepper.is_finished
    assert stepper.current_step is None
    stepper.play()
    assert not stepper.is_playing


def test_reset() -> None:
    stepper = Stepper()
    stepper.start(bubble_steps())
    stepper.reset()

    assert stepper.state == StepperState.IDLE
    assert stepper.current_step is None
