"""Contiguous memory allocation: first, best, worst and next fit."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence


@dataclass(frozen=True)
class Allocation:
    """Where one process was placed.

    ``process`` is numbered from 1, ``block`` is a 0-based block index or
    ``None`` when no block could hold the process. ``fragment`` is what was
    left free in the block right after the process was placed.
    """

    process: int
    size: int
    block: int | None
    fragment: int = 0

    @property
    def allocated(self) -> bool:
        return self.block is not None


Chooser = Callable[[list[int], int], "int | None"]


def _sizes(values: Iterable[int], what: str) -> list[int]:
    sizes = list(values)
    if any(size <= 0 for size in sizes):
        raise ValueError(f"{what} sizes must be positive")
    return sizes


def _allocate(
    blocks: Iterable[int], processes: Iterable[int], choose: Chooser
) -> list[Allocation]:
    free = _sizes(blocks, "block")
    sizes = _sizes(processes, "process")
    allocations = []
    for number, size in enumerate(sizes, 1):
        index = choose(free, size)
        if index is None:
            allocations.append(Allocation(number, size, None))
        else:
            free[index] -= size
            allocations.append(Allocation(number, size, index, free[index]))
    return allocations


def _fitting(free: list[int], size: int) -> list[int]:
    return [j for j, room in enumerate(free) if room >= size]


def first_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[Allocation]:
    """Place each process in the lowest-numbered block that can hold it."""

    def choose(free: list[int], size: int) -> int | None:
        return next(iter(_fitting(free, size)), None)

    return _allocate(blocks, processes, choose)


def best_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[Allocation]:
    """Place each process in the smallest block that can hold it."""

    def choose(free: list[int], size: int) -> int | None:
        fitting = _fitting(free, size)
        return min(fitting, key=free.__getitem__) if fitting else None

    return _allocate(blocks, processes, choose)


def worst_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[Allocation]:
    """Place each process in the largest block that can hold it."""

    def choose(free: list[int], size: int) -> int | None:
        fitting = _fitting(free, size)
        return max(fitting, key=free.__getitem__) if fitting else None

    return _allocate(blocks, processes, choose)


def next_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[Allocation]:
    """Search circularly from the block that received the previous process."""
    position = 0

    def choose(free: list[int], size: int) -> int | None:
        nonlocal position
        count = len(free)
        for index in ((position + k) % count for k in range(count)):
            if free[index] >= size:
                position = index
                return index
        return None

    return _allocate(blocks, processes, choose)


def total_fragmentation(allocations: Iterable[Allocation]) -> int:
    """Sum the internal fragmentation of every placed process."""
    return sum(a.fragment for a in allocations if a.allocated)


def format_allocations(allocations: Sequence[Allocation]) -> str:
    """Render the allocation table and the total internal fragmentation."""
    lines = [
        f"{'Process':<10}{'Process Size':<15}{'Block No':<10}{'Fragment':<10}",
        "-" * 45,
    ]
    for a in allocations:
        row = f"{a.process:<10}{a.size:<15}"
        if a.allocated:
            row += f"{a.block + 1:<10}{a.fragment:<10}"
        else:
            row += f"{'NA':<10}{'-':<10}"
        lines.append(row)
    lines.append("")
    lines.append(f"Total Internal Fragmentation: {total_fragmentation(allocations)}")
    return "\n".join(lines)


class _Reader:
    def __init__(self, stream) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def integer(
        self, prompt: str, retry: str, valid: Callable[[int], bool] = lambda v: True
    ) -> int:
        print(prompt, end="", flush=True)
        for token in self._tokens:
            try:
                value = int(token)
            except ValueError:
                value = None
            if value is not None and valid(value):
                return value
            print(retry, end="", flush=True)
        raise EOFError("input ended")


_MENU = """
--- Memory Allocation Menu ---
1. First Fit
2. Best Fit
3. Worst Fit
4. Next Fit
5. Exit"""

_STRATEGIES = {
    1: ("First Fit", first_fit),
    2: ("Best Fit", best_fit),
    3: ("Worst Fit", worst_fit),
    4: ("Next Fit", next_fit),
}


def _positive(v: int) -> bool:
    return v > 0


def _menu(reader: _Reader) -> None:
    count_retry = "Invalid input. Enter a positive number: "
    size_retry = "Invalid size. Enter again: "
    block_count = reader.integer(
        "Enter number of memory blocks: ", count_retry, _positive
    )
    print("Enter size of each block:")
    blocks = [
        reader.integer(f"Block {i}: ", size_retry, _positive)
        for i in range(1, block_count + 1)
    ]
    process_count = reader.integer("Enter number of processes: ", count_retry, _positive)
    print("Enter size of each process:")
    processes = [
        reader.integer(f"Process {i}: ", size_retry, _positive)
        for i in range(1, process_count + 1)
    ]
    while True:
        print(_MENU)
        choice = reader.integer(
            "Enter your choice: ", "Invalid input. Enter a number between 1 and 5: "
        )
        if choice == 5:
            print("Exiting...")
            return
        if choice not in _STRATEGIES:
            print("Invalid choice. Try again.")
            continue
        name, strategy = _STRATEGIES[choice]
        print(f"\n{name} Allocation:")
        print(format_allocations(strategy(blocks, processes)))


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive memory allocation simulator reading from standard input."""
    parser = argparse.ArgumentParser(
        prog="ossim-memory", description="Simulate contiguous memory allocation."
    )
    parser.parse_args(argv)
    try:
        _menu(_Reader(sys.stdin))
    except EOFError:
        print("\nError: unexpected end of input", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())