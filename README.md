# sysdemos

A collection of small, self-contained demonstrations of classic
systems-programming ideas, each written as an ordinary Python module, most
with a command to run it. It needs only the standard library.

## Installing

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## What is inside

| Module | Shows |
| --- | --- |
| `sysdemos.rational` | `Rational` numbers held as 64-bit numerator/denominator pairs. Arithmetic (`add`, `subtract`, `multiply`, `divide`) returns a new `Rational` whose `valid` flag is cleared on 64-bit overflow or a zero denominator; `compare` returns a `Comparison`. Also `checked_add`, `checked_subtract`, `checked_multiply` (raise `OverflowError`) and `gcd` |
| `sysdemos.point` | A 2D `Point` with in-place `add` and `distance` |
| `sysdemos.lwlog` | `LwLog`, a levelled, optionally coloured logger writing to standard error (or a given stream), with syslog-style `Level`s from `EMERG` to `DEBUG` |
| `sysdemos.wordtable` | Fixed-capacity word tables: `WordTable` of `WordEntry` records (a count that reaches zero stays at zero; `delete_entry` drops an entry) and `CountTable` of plain counts clamped at zero; `TableFullError` when a new word finds no room |
| `sysdemos.wordcount_sort` | `sort_word_counts` and `search_word_counts` over `WordCount` records, ordered by count in a chosen `SortOrder` |
| `sysdemos.employee` | An `Employee` with team mates and a `describe()` text |
| `sysdemos.regex_match` | `compile_pattern`, `find_matches` and `format_matches`: successive regular-expression `Match`es with their offsets; POSIX classes such as `[:digit:]` are accepted; `RegexError` on a bad pattern |
| `sysdemos.parity` | `parity_write` stripes two byte blocks plus their XOR; `parity_read` rebuilds one from the other two |
| `sysdemos.allocator` | A first-fit `Heap` with control blocks: `allocate`, `free`, `write`, `read`; freed blocks are reused but never split or merged |
| `sysdemos.fileio` | `write_all` writes a file completely; `copy_in_chunks` reads it back a few bytes at a time |
| `sysdemos.shared_memory` | `publish` and `read_shared`: text passed through a memory-mapped file |
| `sysdemos.sync` | Busy-waiting `SpinLock`, a non-blocking `Semaphore` whose `down()` reports success, and a pulse-counting `Monitor` |
| `sysdemos.work_queue` | A FIFO `WorkQueue` of integers that knows when the producer is done adding |
| `sysdemos.counting` | Threads adding to a shared counter: `count_with_lock`, `count_unlocked`, `count_with_monitor`, `count_with_semaphore` |
| `sysdemos.message_queue` | `MessageQueue`: up to five messages of at most 20 bytes in a memory-mapped file shared between processes, taken back newest first |
| `sysdemos.pthread_examples` | `hello_threads`, `hello_join` and `condition_counting` (with a `SharedCount`) |

## A quick taste

```python
from sysdemos.point import Point
from sysdemos.rational import Rational

Point(3.0, 0.0).distance(Point(0.0, 4.0))   # 5.0
str(Rational(300, 400))                     # '3/4 (valid=1)'
```

## Commands

    sysdemos-rational          # rational arithmetic, including overflow
    sysdemos-point             # two points and the distance between them
    sysdemos-lwlog             # one message at every log level, on stderr
    sysdemos-wordtable [wordtable|wordinfo|counts|manpage]
    sysdemos-wordcount-sort    # sort word counts and search them
    sysdemos-employee          # an employee before and after adding team mates
    sysdemos-regex "All cows eat grass."   # word matches with positions (reads a line from stdin without an argument)
    sysdemos-parity [DIR]      # write f0, f1, f2, remove f1, rebuild it from parity
    sysdemos-allocator         # allocate, use and free a heap block
    sysdemos-write [PATH]      # write "foobar" to PATH (default "file")
    sysdemos-read [PATH]       # copy PATH to stdout in 5-byte chunks
    sysdemos-shm-producer [PATH]   # publish "Hello World" (default "shared.dat"), wait for a key
    sysdemos-shm-consumer [PATH]   # print the published text
    sysdemos-counting [lock|unlocked|monitor|semaphore] [COUNT]   # default: lock, 100000 per thread
    sysdemos-mq-producer [PATH]    # push "0" to "99" into a shared queue, then wait for a key
    sysdemos-mq-consumer [PATH]    # print messages taken from the queue until interrupted
    sysdemos-threads [hello|join|cv]

The shared-memory and message-queue pairs are meant to be run in two
terminals: start the producer first, then the consumer. The message-queue
producer blocks once five messages are waiting, so start the consumer while
it runs.

## Limits

- `sysdemos.message_queue` locks its file with `fcntl`, so it works on POSIX
  systems only.
- The locks in `sysdemos.sync` spin rather than sleep; the counting commands
  are meant to show correctness, not speed.
- `MessageQueue` and `Monitor` coordinate by polling; there are no kernel-level
  waits, device drivers or system calls of their own in this package.