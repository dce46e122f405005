"""Threads adding to a shared counter, with and without synchronisation."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable

from sysdemos.sync import Monitor, Semaphore, SpinLock
from sysdemos.work_queue import WorkQueue


def _run(workers: list[Callable[[], None]], producer: Callable[[], None] | None = None) -> None:
    threads = [threading.Thread(target=work) for work in workers]
    for thread in threads:
        thread.start()
    if producer is not None:
        producer()
    for thread in threads:
        thread.join()


def count_with_lock(n: int, threads: int = 2) -> int:
    """Each thread adds 1 to a shared count n times under a spin lock."""
    lock = SpinLock()
    count = 0

    def increment() -> None:
        nonlocal count
        for _ in range(n):
            with lock:
                c = count
                c = c + 1
                count = c

    _run([increment] * threads)
    return count


def count_unlocked(n: int, threads: int = 2) -> int:
    """As count_with_lock, but without a lock: updates may be lost."""
    count = 0

    def increment() -> None:
        nonlocal count
        for _ in range(n):
            c = count
            c = c + 1
            count = c

    _run([increment] * threads)
    return count


def count_with_monitor(count_per_thread: int) -> int:
    """Two workers sum 2*count_per_thread ones handed over through a monitor."""
    monitor = Monitor()
    queue = WorkQueue(reject_zero=True)
    count = 0
    workers = 2

    def increment() -> None:
        nonlocal count
        with monitor:
            while queue.has_work_left():
                while queue.is_empty() and queue.has_work_left():
                    monitor.wait()
                if not queue.is_empty():
                    count += queue.dequeue()

    def populate() -> None:
        for _ in range(count_per_thread * 2):
            with monitor:
                queue.enqueue(1)
                monitor.pulse()
        with monitor:
            queue.done_adding()
            # Wake any worker still waiting once every pulse has been used up.
            for _ in range(workers):
                monitor.pulse()

    _run([increment] * workers, populate)
    return count


def count_with_semaphore(count_per_thread: int) -> int:
    """Two workers sum 2*count_per_thread ones, polling a non-blocking semaphore."""
    lock = SpinLock()
    semaphore = Semaphore(0)
    queue = WorkQueue()
    count = 0

    def increment() -> None:
        nonlocal count
        work_left = True
        while work_left:
            with lock:
                if not queue.has_work_left():
                    work_left = False
                elif semaphore.down():
                    count += queue.dequeue()

    def populate() -> None:
        for _ in range(count_per_thread * 2):
            with lock:
                queue.enqueue(1)
                semaphore.up()
        with lock:
            queue.done_adding()

    _run([increment, increment], populate)
    return count


_DEMOS: dict[str, Callable[[int], int]] = {
    "lock": count_with_lock,
    "unlocked": count_unlocked,
    "monitor": count_with_monitor,
    "semaphore": count_with_semaphore,
}

_DEFAULT_COUNT = 100_000


def main(argv: list[str] | None = None) -> int:
    """Run one counting test: [lock|unlocked|monitor|semaphore] [count per thread]."""
    args = sys.argv[1:] if argv is None else argv
    name = args[0] if args else "lock"
    demo = _DEMOS.get(name)
    if demo is None:
        sys.stderr.write(f"unknown test {name!r}; choose from {', '.join(_DEMOS)}\n")
        return 2
    try:
        n = int(args[1]) if len(args) > 1 else _DEFAULT_COUNT
    except ValueError:
        sys.stderr.write(f"invalid count {args[1]!r}\n")
        return 2

    expected = 2 * n
    sys.stdout.write(f"starting test. final count should be {expected}\n")
    count = demo(n)
    if count != expected:
        sys.stdout.write(f"****** Error. Final count is {count}\n")
        return 1
    sys.stdout.write(f"****** OK. Final count is {count}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())