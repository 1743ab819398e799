"""
control.py — Run Control Flags
===============================
The only mutable state shared between a running sort and whoever is
steering it.  Three flags, one lock:

    running  claimed by try_begin_run(), released by end_run()
    paused   the run blocks at its next checkpoint until cleared
    stopped  the run unwinds at its next checkpoint; only reset()
             or a fresh try_begin_run() clears it

State machine:
    idle     →  try_begin_run()    →  running
    running  ⇄  set_paused(bool)   ⇄  running + paused
    running  →  set_stopped(True)  →  stopped
    any      →  reset()            →  idle

Thread safety:
  Every read and write goes through one threading.Condition.  Writers
  notify, so a paused run wakes as soon as resume or stop lands; the
  poll interval only caps how long a missed wake-up can go unnoticed.
"""

import threading


POLL_INTERVAL = 0.1   # seconds


class SortControl:

    def __init__(self, poll_interval: float = POLL_INTERVAL):
        self.poll_interval = poll_interval
        self._cond    = threading.Condition()
        self._running = False
        self._paused  = False
        self._stopped = False

    # ------------------------------------------------------------------
    # Run gate
    # ------------------------------------------------------------------
    def try_begin_run(self) -> bool:
        """Claim the run.  Returns False, changing nothing, if one is active."""
        with self._cond:
            if self._running:
                return False
            self._running = True
            self._paused  = False
            self._stopped = False
            self._cond.notify_all()
            return True

    def end_run(self) -> None:
        with self._cond:
            self._running = False
            self._cond.notify_all()

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------
    def set_paused(self, paused: bool) -> None:
        with self._cond:
            self._paused = paused
            self._cond.notify_all()

    def set_stopped(self, stopped: bool) -> None:
        with self._cond:
            self._stopped = stopped
            self._cond.notify_all()

    def reset(self) -> None:
        with self._cond:
            self._running = False
            self._paused  = False
            self._stopped = False
            self._cond.notify_all()

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        with self._cond:
            return self._running

    @property
    def is_paused(self) -> bool:
        with self._cond:
            return self._paused

    @property
    def is_stopped(self) -> bool:
        with self._cond:
            return self._stopped

    # ------------------------------------------------------------------
    # Checkpoints (called by the run itself)
    # ------------------------------------------------------------------
    def checkpoint(self) -> bool:
        """
        Block while paused.  Returns True if the run may go on, False
        once it has been stopped.
        """
        with self._cond:
            while self._paused and not self._stopped:
                self._cond.wait(self.poll_interval)
            return not self._stopped

    def sleep(self, seconds: float) -> bool:
        """Pacing wait that a stop cuts short.  Returns False if stopped."""
        with self._cond:
            if seconds > 0:
                self._cond.wait_for(lambda: self._stopped, timeout=seconds)
            return not self._stopped

    def __repr__(self) -> str:
        return (
            f"SortControl(running={self._running}, paused={self._paused}, "
            f"stopped={self._stopped})"
        )
