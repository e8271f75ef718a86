"""Multi-threaded in-place quicksort using Hoare partitioning."""

from __future__ import annotations

import argparse
import random
import threading
import time
from collections.abc import MutableSequence, Sequence

TAB_SIZE = 100_000_000
NB_THREADS = 8
VALUE_RANGE = 1000


class _Sorter:
    """Sorts ranges of one sequence, spawning threads while a budget allows."""

    def __init__(self, values: MutableSequence, max_threads: int) -> None:
        self._values = values
        self._max_threads = max_threads
        self._active = 0
        self._lock = threading.Lock()

    def _claim_threads(self) -> bool:
        with self._lock:
            if self._active < self._max_threads:
                self._active += 2
                return True
            return False

    def _release_threads(self) -> None:
        with self._lock:
            self._active -= 2

    def _partition(self, start: int, end: int) -> int:
        values = self._values
        pivot = values[start]
        left = start - 1
        right = end + 1
        while True:
            right -= 1
            while values[right] > pivot:
                right -= 1
            left += 1
            while values[left] < pivot:
                left += 1
            if left < right:
                values[left], values[right] = values[right], values[left]
            else:
                return right

    def sort(self, start: int, end: int) -> None:
        while start < end:
            split = self._partition(start, end)
            if self._claim_threads():
                workers = [
                    threading.Thread(target=self.sort, args=(start, split)),
                    threading.Thread(target=self.sort, args=(split + 1, end)),
                ]
                for worker in workers:
                    worker.start()
                for worker in workers:
                    worker.join()
                self._release_threads()
                return
            # Recurse into the smaller half, loop over the larger one.
            if split - start < end - split:
                self.sort(start, split)
                start = split + 1
            else:
                self.sort(split + 1, end)
                end = split


def quick_sort(
    values: MutableSequence,
    start: int = 0,
    end: int | None = None,
    max_threads: int = NB_THREADS,
) -> None:
    """Sort ``values[start:end + 1]`` in place; ``end`` is inclusive."""
    if end is None:
        end = len(values) - 1
    if start >= end:
        return
    if start < 0 or end >= len(values):
        raise IndexError(f"range [{start}, {end}] outside sequence of length {len(values)}")
    _Sorter(values, max_threads).sort(start, end)


def _random_values(size: int, rng: random.Random) -> list[int]:
    return [rng.randrange(VALUE_RANGE) for _ in range(size)]


def is_sorted(values: Sequence) -> bool:
    """Return True when ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in zip(values, values[1:]))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time a threaded quicksort of random integers.")
    parser.add_argument("--size", type=int, default=TAB_SIZE, help="number of values to sort")
    parser.add_argument("--threads", type=int, default=NB_THREADS, help="thread budget")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("--size must not be negative")

    started = time.process_time()
    values = _random_values(args.size, random.Random(args.seed))
    quick_sort(values, max_threads=args.threads)
    elapsed = time.process_time() - started
    print(f"time={elapsed:f}")
    return 0