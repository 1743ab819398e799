import threading
import time

from engine.control import SortControl


def test_run_gate_is_exclusive() -> None:
    control = SortControl()

    assert control.try_begin_run() is True
    assert control.try_begin_run() is False
    control.end_run()
    assert control.try_begin_run() is True


def test_begin_run_clears_leftover_flags() -> None:
    control = SortControl()
    control.set_paused(True)
    control.set_stopped(True)

    assert control.try_begin_run()
    assert not control.is_paused
    assert not control.is_stopped


def test_checkpoint_passes_when_idle_and_fails_once_stopped() -> None:
    control = SortControl()
    assert control.checkpoint() is True

    control.set_stopped(True)
    assert control.checkpoint() is False


def test_checkpoint_blocks_until_resumed() -> None:
    control = SortControl(poll_interval=0.01)
    control.set_paused(True)
    passed = threading.Event()

    def worker() -> None:
        control.checkpoint()
        passed.set()

    thread = threading.Thread(target=worker)
    thread.start()
    assert not passed.wait(0.1)

    control.set_paused(False)
    assert passed.wait(1.0)
    thread.join()


def test_stop_releases_a_paused_checkpoint() -> None:
    control = SortControl(poll_interval=0.01)
    control.set_paused(True)
    result = []

    thread = threading.Thread(target=lambda: result.append(control.checkpoint()))
    thread.start()
    time.sleep(0.05)
    control.set_stopped(True)
    thread.join(1.0)

    assert result == [False]


def test_sleep_is_cut_short_by_stop() -> None:
    control = SortControl()
    threading.Timer(0.05, control.set_stopped, args=(True,)).start()

    started = time.monotonic()
    assert control.sleep(5.0) is False
    assert time.monotonic() - started < 2.0


def test_reset_returns_to_idle() -> None:
    control = SortControl()
    control.try_begin_run()
    control.set_paused(True)
    control.set_stopped(True)

    control.reset()

    assert not control.is_running
    assert not control.is_paused
    assert not control.is_stopped
