"""Small threading examples: greeting threads, joining, and a condition variable."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

NUM_THREADS = 5
TCOUNT = 10
COUNT_LIMIT = 12
_WATCHER_BONUS = 125


class _Printer:
    """Writes whole lines to a stream, one thread at a time."""

    def __init__(self, out: TextIO | None) -> None:
        self._out = out if out is not None else sys.stdout
        self._lock = threading.Lock()

    def __call__(self, line: str) -> None:
        with self._lock:
            self._out.write(line + "\n")


@dataclass
class SharedCount:
    """A counter and the condition that guards it, shared by several threads."""

    count: int = 0
    condition: threading.Condition = field(default_factory=threading.Condition)


def _start_greeters(num_threads: int, say: Callable[[str], None]) -> list[threading.Thread]:
    def greet(tid: int, square: int) -> None:
        say(f"Hello World! It's me, thread #{tid}!")
        say(f"sqr({tid}) = {square}")

    threads = []
    for tid in range(num_threads):
        say(f"In main: creating thread {tid}")
        thread = threading.Thread(target=greet, args=(tid, tid * tid))
        thread.start()
        threads.append(thread)
    return threads


def hello_threads(num_threads: int = NUM_THREADS, out: TextIO | None = None) -> None:
    """Start threads that greet and print their square; main announces its exit at once."""
    say = _Printer(out)
    threads = _start_greeters(num_threads, say)
    say("Exiting main thread")
    # The process only ends once every thread has finished.
    for thread in threads:
        thread.join()


def hello_join(num_threads: int = NUM_THREADS, out: TextIO | None = None) -> None:
    """Start greeting threads and join each of them in turn before exiting."""
    say = _Printer(out)
    threads = _start_greeters(num_threads, say)
    for tid, thread in enumerate(threads):
        thread.join()
        say(f"Main: completed join with thread {tid} having a status of 0")
    say("Exiting main thread")


def condition_counting(
    out: TextIO | None = None,
    increments: int = TCOUNT,
    limit: int = COUNT_LIMIT,
    pause: float = 1.0,
) -> int:
    """Two threads count up while a third waits for the limit, then adds 125.

    Returns the final count.
    """
    if limit > 2 * increments:
        raise ValueError(f"limit {limit} can never be reached with {increments} increments each")
    say = _Printer(out)
    shared = SharedCount()

    def inc_count(my_id: int) -> None:
        for i in range(increments):
            with shared.condition:
                shared.count += 1
                if shared.count == limit:
                    shared.condition.notify()
                    say(f"inc_count(): thread {my_id}, count = {shared.count}  Threshold reached.")
                say(f"inc_count(): thread {my_id}, count = {shared.count}, i = {i}, unlocking mutex")
            time.sleep(pause)

    def watch_count(my_id: int) -> None:
        say(f"Starting watch_count(): thread {my_id}")
        with shared.condition:
            while shared.count < limit:
                shared.condition.wait()
                say(f"watch_count(): thread {my_id} Condition signal received.")
            shared.count += _WATCHER_BONUS
            say(f"watch_count(): thread {my_id} count now = {shared.count}.")

    threads = [
        threading.Thread(target=watch_count, args=(1,)),
        threading.Thread(target=inc_count, args=(2,)),
        threading.Thread(target=inc_count, args=(3,)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    say(f"Main(): Waited on {len(threads)}  threads. Done.")
    return shared.count


_DEMOS: dict[str, Callable[[], object]] = {
    "hello": hello_threads,
    "join": hello_join,
    "cv": condition_counting,
}


def main(argv: list[str] | None = None) -> int:
    """Run one example: hello, join or cv (default hello)."""
    args = sys.argv[1:] if argv is None else argv
    name = args[0] if args else "hello"
    demo = _DEMOS.get(name)
    if demo is None:
        sys.stderr.write(f"unknown example {name!r}; choose from {', '.join(_DEMOS)}\n")
        return 2
    demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())