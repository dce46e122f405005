"""Busy-waiting synchronisation primitives: a spin lock, a counting semaphore and a monitor."""

from __future__ import annotations

import sys
import threading
import time


def _yield() -> None:
    """Give up the processor so another thread can run."""
    time.sleep(0)


class SpinLock:
    """A test-and-set lock that spins, yielding, until it wins the flag."""

    def __init__(self) -> None:
        self._flag = threading.Lock()

    @property
    def locked(self) -> bool:
        return self._flag.locked()

    def _test_and_set(self) -> bool:
        """Atomically set the flag; True if it was clear before."""
        return self._flag.acquire(blocking=False)

    def acquire(self) -> None:
        while not self._test_and_set():
            _yield()

    def release(self) -> None:
        """Clear the flag; clearing an already clear flag does nothing."""
        if self._flag.locked():
            self._flag.release()

    def __enter__(self) -> SpinLock:
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()


class Semaphore:
    """A counting semaphore whose down() never blocks: it reports whether it succeeded."""

    def __init__(self, initial_value: int = 0) -> None:
        self._lock = SpinLock()
        self._count = initial_value

    @property
    def value(self) -> int:
        return self._count

    def up(self) -> None:
        with self._lock:
            self._count += 1

    def down(self) -> bool:
        """Take one unit if any is available; True on success."""
        with self._lock:
            if self._count > 0:
                self._count -= 1
                return True
            return False


class Monitor:
    """A lock with pulse counting: wait() gives up the lock until a pulse arrives."""

    def __init__(self) -> None:
        self._lock = SpinLock()
        self._locked = False
        self._pulse = 0

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def pulses(self) -> int:
        """Pulses sent but not yet consumed by a waiter."""
        return self._pulse

    def enter(self) -> None:
        self._lock.acquire()
        self._locked = True

    def exit(self) -> None:
        self._locked = False
        self._lock.release()

    def wait(self) -> None:
        """Release the lock until a pulse is pending, then consume it holding the lock."""
        if not self._locked:
            sys.stderr.write("wait called wait without a lock\n")
        while self._pulse == 0:
            self.exit()
            _yield()
            self.enter()
        self._pulse -= 1

    def pulse(self) -> None:
        """Signal one waiter; must be called holding the lock."""
        if not self._locked:
            sys.stderr.write("pulse called without a lock\n")
        self._pulse += 1

    def __enter__(self) -> Monitor:
        self.enter()
        return self

    def __exit__(self, *args: object) -> None:
        self.exit()