"""Timing benchmark comparing the priority queue implementations."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from pqbench.binary_heap import BinaryHeap
from pqbench.dynamic_array import DynamicArrayQueue
from pqbench.linked_list import LinkedListQueue

DEFAULT_SIZES = (100, 500, 1000, 5000, 10000, 50000, 100000, 500000, 1000000)
DEFAULT_REPS = 100
RESULTS_FILE = "wyniki.txt"
CASES_FILE = "przypadki.txt"


class PriorityQueue(Protocol):
    def is_empty(self) -> bool: ...

    def push(self, priority: int, value: int) -> None: ...

    def pop(self) -> int: ...

    def peek(self) -> int: ...

    def modify_priority(self, old_priority: int, new_priority: int) -> None: ...


@dataclass
class SizeResult:
    """Average operation times, in nanoseconds, measured at one data size.

    Timings are kept in groups; a report separates groups with blank lines
    when there is more than one.
    """

    size: int
    groups: list[dict[str, int]] = field(default_factory=list)

    @property
    def timings(self) -> dict[str, int]:
        """All timings of every group in one mapping."""
        merged: dict[str, int] = {}
        for group in self.groups:
            merged.update(group)
        return merged


def _timed(operation: Callable[[], object]) -> int:
    """Run an operation and return how long it took in nanoseconds.

    An empty queue or a missing priority is part of what is being timed,
    so such failures are swallowed.
    """
    start = time.perf_counter_ns()
    try:
        operation()
    except LookupError:
        pass
    return time.perf_counter_ns() - start


def _quietly(operation: Callable[[], object]) -> None:
    try:
        operation()
    except LookupError:
        pass


def fill_structure(structure: PriorityQueue, data_size: int, rng: random.Random) -> None:
    """Push data_size random (priority, value) pairs, both below data_size."""
    for _ in range(data_size):
        structure.push(rng.randrange(data_size), rng.randrange(data_size))


def fill_sorted_structure(structure: PriorityQueue, data_size: int) -> None:
    """Push the pairs (i, i) for i from 0 up to data_size - 1."""
    for i in range(data_size):
        structure.push(i, i)


def clear_structure(structure: PriorityQueue) -> None:
    """Pop until the structure is empty."""
    while not structure.is_empty():
        structure.pop()


def measure_random(
    structure: PriorityQueue,
    sizes: Iterable[int],
    reps: int,
    rng: random.Random,
) -> list[SizeResult]:
    """Time push, pop, modify_priority and peek on randomly filled data."""
    results = []
    for size in sizes:
        fill_structure(structure, size, rng)

        total = 0
        for _ in range(reps):
            priority = rng.randrange(size)
            total += _timed(lambda: structure.push(priority, -1))
            _quietly(structure.pop)
        push_time = total // reps

        total = 0
        for _ in range(reps):
            total += _timed(structure.pop)
            structure.push(rng.randrange(size), rng.randrange(size))
        pop_time = total // reps

        total = 0
        for _ in range(reps):
            old, new = rng.randrange(size), rng.randrange(size)
            total += _timed(lambda: structure.modify_priority(old, new))
        modify_time = total // reps

        total = 0
        for _ in range(reps):
            total += _timed(structure.peek)
        peek_time = total // reps

        clear_structure(structure)
        results.append(
            SizeResult(
                size,
                [
                    {
                        "push": push_time,
                        "pop": pop_time,
                        "modify_priority": modify_time,
                        "peek": peek_time,
                    }
                ],
            )
        )
    return results


_ModifyCase = tuple[str, tuple[int, int], "tuple[int, int] | None"]
_PushCase = tuple[str, int]


def _list_plan(n: int) -> tuple[list[_ModifyCase], list[_PushCase]]:
    half = n // 2
    return (
        [
            ("optimistic", (0, 1), (1, 0)),
            ("average", (half, 1), (1, half)),
            ("pessimistic", (n - 1, 1), (1, n - 1)),
        ],
        [("optimistic", 0), ("average", half), ("pessimistic", n)],
    )


def _array_plan(n: int) -> tuple[list[_ModifyCase], list[_PushCase]]:
    modify, _ = _list_plan(n)
    half = n // 2
    return modify, [("optimistic", n), ("average", half), ("pessimistic", 0)]


def _heap_plan(n: int) -> tuple[list[_ModifyCase], list[_PushCase]]:
    half = n // 2
    return (
        [
            ("optimistic", (half, half), None),
            ("average", (n, half), (half, n)),
            ("pessimistic", (n - 1, 0), (0, n - 1)),
        ],
        [("optimistic", n), ("average", half), ("pessimistic", 0)],
    )


_CASE_PLANS: dict[str, Callable[[int], tuple[list[_ModifyCase], list[_PushCase]]]] = {
    "LinkedListQueue": _list_plan,
    "DynamicArrayQueue": _array_plan,
    "BinaryHeap": _heap_plan,
}


def measure_cases(
    name: str,
    structure: PriorityQueue,
    sizes: Iterable[int],
    reps: int,
) -> list[SizeResult]:
    """Time best, average and worst cases of modify_priority and push.

    The structure is filled with sorted data; name selects the set of cases
    suited to that kind of structure.
    """
    try:
        plan = _CASE_PLANS[name]
    except KeyError:
        raise ValueError(f"no benchmark cases for structure {name!r}") from None

    results = []
    for size in sizes:
        fill_sorted_structure(structure, size)
        modify_cases, push_cases = plan(size)

        modify_times: dict[str, int] = {}
        for label, (old, new), restore in modify_cases:
            total = 0
            for _ in range(reps):
                total += _timed(lambda: structure.modify_priority(old, new))
                if restore is not None:
                    back_old, back_new = restore
                    _quietly(lambda: structure.modify_priority(back_old, back_new))
            modify_times[f"modify_priority ({label})"] = total // reps

        push_times: dict[str, int] = {}
        for label, priority in push_cases:
            total = 0
            for _ in range(reps):
                total += _timed(lambda: structure.push(priority, 1))
                _quietly(structure.pop)
            push_times[f"push ({label})"] = total // reps

        clear_structure(structure)
        results.append(SizeResult(size, [modify_times, push_times]))
    return results


def format_results(name: str, results: Sequence[SizeResult]) -> str:
    """Render the results for one structure as report text."""
    lines = [f"Testing structure: {name}"]
    for result in results:
        lines.append(f"Number of elements: {result.size}")
        spaced = len(result.groups) > 1
        for group in result.groups:
            lines.extend(f"Average {label} time: {ns} ns" for label, ns in group.items())
            if spaced:
                lines.append("")
    return "\n".join(lines) + "\n"


def _positive_int(text: str) -> int:
    number = int(text)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return number


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pqbench",
        description="Time operations of three priority queue implementations.",
    )
    parser.add_argument(
        "--sizes", nargs="+", type=_positive_int, default=list(DEFAULT_SIZES),
        help="data sizes to test",
    )
    parser.add_argument(
        "--reps", type=_positive_int, default=DEFAULT_REPS,
        help="repetitions of each timed operation",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--results", default=RESULTS_FILE, help="random-data report file")
    parser.add_argument("--cases", default=CASES_FILE, help="best/worst case report file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run both benchmarks and write their reports; return the exit status."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    structures: list[tuple[str, PriorityQueue]] = [
        ("LinkedListQueue", LinkedListQueue()),
        ("DynamicArrayQueue", DynamicArrayQueue()),
        ("BinaryHeap", BinaryHeap()),
    ]

    try:
        results_file = open(args.results, "w", encoding="utf-8")
    except OSError:
        print(f"Cannot open file {args.results}!", file=sys.stderr)
        return 1
    with results_file:
        for name, structure in structures:
            results = measure_random(structure, args.sizes, args.reps, rng)
            results_file.write(format_results(name, results))

    try:
        cases_file = open(args.cases, "w", encoding="utf-8")
    except OSError:
        print(f"Cannot open file {args.cases}!", file=sys.stderr)
        return 1
    with cases_file:
        for name, structure in structures:
            results = measure_cases(name, structure, args.sizes, args.reps)
            cases_file.write(format_results(name, results))

    return 0


if __name__ == "__main__":
    sys.exit(main())