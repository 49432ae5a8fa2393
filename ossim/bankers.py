"""Banker's algorithm: need matrix, safety check and safe sequences."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence

Matrix = Sequence[Sequence[int]]


class UnsafeStateError(ValueError):
    """Raised when no order lets every process run to completion."""


@dataclass(frozen=True)
class ExecutionStep:
    """One process running within a safe sequence."""

    process: int
    allocated: tuple[int, ...]
    available_before: tuple[int, ...]
    available_after: tuple[int, ...]
    sequence_so_far: tuple[int, ...]


def _vector(values: Sequence[int], width: int, name: str) -> list[int]:
    vector = list(values)
    if len(vector) != width:
        raise ValueError(f"{name} must have {width} entries")
    if any(v < 0 for v in vector):
        raise ValueError(f"{name} contains negative value.")
    return vector


def _matrix(rows: Matrix, name: str, width: int | None = None) -> list[list[int]]:
    matrix = [list(row) for row in rows]
    if not matrix:
        raise ValueError(f"{name} matrix must have at least one process")
    width = len(matrix[0]) if width is None else width
    if width <= 0:
        raise ValueError(f"{name} matrix must have at least one resource")
    for row in matrix:
        _vector(row, width, f"{name} matrix")
    return matrix


def compute_need(maximum: Matrix, allocation: Matrix) -> list[list[int]]:
    """Return Max - Allocation, rejecting allocations above the maximum."""
    maximum = _matrix(maximum, "Max")
    allocation = _matrix(allocation, "Allocation", len(maximum[0]))
    if len(allocation) != len(maximum):
        raise ValueError("Max and Allocation matrices differ in size")
    need = [
        [m - a for m, a in zip(max_row, alloc_row)]
        for max_row, alloc_row in zip(maximum, allocation)
    ]
    if any(v < 0 for row in need for v in row):
        raise ValueError("Need matrix has invalid (negative) value.")
    return need


def remaining_available(total: Sequence[int], allocation: Matrix) -> list[int]:
    """Return what is left of the total instances once allocations are made."""
    total = _vector(total, len(total), "Total")
    allocation = _matrix(allocation, "Allocation", len(total))
    left = [t - sum(column) for t, column in zip(total, zip(*allocation))]
    if any(v < 0 for v in left):
        raise UnsafeStateError(
            "Total allocated resources exceed available instances."
        )
    return left


def _prepare(
    allocation: Matrix, need: Matrix, available: Sequence[int]
) -> tuple[list[list[int]], list[list[int]], list[int]]:
    allocation = _matrix(allocation, "Allocation")
    width = len(allocation[0])
    need = _matrix(need, "Need", width)
    if len(need) != len(allocation):
        raise ValueError("Allocation and Need matrices differ in size")
    return allocation, need, _vector(available, width, "Available")


def _fits(need_row: Sequence[int], work: Sequence[int]) -> bool:
    return all(n <= w for n, w in zip(need_row, work))


def safe_sequence(
    allocation: Matrix, need: Matrix, available: Sequence[int]
) -> list[int]:
    """Find a safe sequence by sweeping the processes in index order."""
    allocation, need, work = _prepare(allocation, need, available)
    finished = [False] * len(allocation)
    sequence: list[int] = []
    while len(sequence) < len(allocation):
        found = False
        for i, (alloc_row, need_row) in enumerate(zip(allocation, need)):
            if not finished[i] and _fits(need_row, work):
                work = [w + a for w, a in zip(work, alloc_row)]
                sequence.append(i)
                finished[i] = True
                found = True
        if not found:
            raise UnsafeStateError("System is not in a safe state.")
    return sequence


def all_safe_sequences(
    allocation: Matrix, need: Matrix, available: Sequence[int]
) -> Iterator[tuple[int, ...]]:
    """Yield every safe sequence, lowest process indices explored first."""
    allocation, need, work = _prepare(allocation, need, available)
    finished = [False] * len(allocation)
    sequence: list[int] = []

    def explore(work: list[int]) -> Iterator[tuple[int, ...]]:
        if len(sequence) == len(allocation):
            yield tuple(sequence)
            return
        for i, (alloc_row, need_row) in enumerate(zip(allocation, need)):
            if finished[i] or not _fits(need_row, work):
                continue
            finished[i] = True
            sequence.append(i)
            yield from explore([w + a for w, a in zip(work, alloc_row)])
            sequence.pop()
            finished[i] = False

    yield from explore(work)


def execution_steps(
    sequence: Sequence[int], allocation: Matrix, available: Sequence[int]
) -> list[ExecutionStep]:
    """Trace the available resources as each process in the sequence finishes."""
    allocation = _matrix(allocation, "Allocation")
    current = tuple(_vector(available, len(allocation[0]), "Available"))
    steps: list[ExecutionStep] = []
    done: list[int] = []
    for process in sequence:
        if not 0 <= process < len(allocation):
            raise ValueError(f"no process P{process}")
        allocated = tuple(allocation[process])
        after = tuple(c + a for c, a in zip(current, allocated))
        done.append(process)
        steps.append(ExecutionStep(process, allocated, current, after, tuple(done)))
        current = after
    return steps


class _Reader:
    def __init__(self, stream) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def integer(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"invalid integer input: {token!r}") from None

    def row(self, width: int) -> list[int]:
        return [self.integer() for _ in range(width)]


def _join(values: Sequence[int]) -> str:
    return " ".join(str(v) for v in values)


def _show_steps(steps: Sequence[ExecutionStep]) -> None:
    print("\nStep-by-step execution of a safe sequence:")
    for step in steps:
        print(f"\nProcess {step.process} is executing...")
        print(f"Allocated resources: {_join(step.allocated)}")
        print(f"Available resources before execution: {_join(step.available_before)}")
        print(
            f"Available resources after Process {step.process} completes: "
            f"{_join(step.available_after)}"
        )
        so_far = " -> ".join(f"P{p}" for p in step.sequence_so_far)
        print(f"Safe Sequence so far: {so_far}")


def _run(reader: _Reader, list_all: bool) -> None:
    print("Enter the number of processes: ", end="", flush=True)
    processes = reader.integer()
    print("Enter the number of resources: ", end="", flush=True)
    resources = reader.integer()
    if processes <= 0 or resources <= 0:
        raise ValueError("Invalid number of processes or resources.")
    print("Enter the Max matrix: ")
    maximum = [reader.row(resources) for _ in range(processes)]
    _matrix(maximum, "Max")
    print("Enter the Allocation matrix: ")
    allocation = [reader.row(resources) for _ in range(processes)]
    _matrix(allocation, "Allocation")
    need = compute_need(maximum, allocation)
    if list_all:
        print("Enter the total instances of each resource: ")
    else:
        print("Enter the available matrix: ")
    available = _vector(reader.row(resources), resources, "Available")
    if list_all:
        available = remaining_available(available, allocation)

    print("\nNeed Matrix (Max - Allocated):")
    for row in need:
        print(_join(row))

    if not list_all:
        sequence = safe_sequence(allocation, need, available)
        print("Safe sequence is: " + " ".join(f"P{p}" for p in sequence))
        return

    print("\nFinding Safe Sequences...")
    sequences = list(all_safe_sequences(allocation, need, available))
    if not sequences:
        print("No Safe sequences")
        return
    _show_steps(execution_steps(sequences[0], allocation, available))
    print("\nAll Safe Sequences: ")
    for sequence in sequences:
        print(" -> ".join(f"P{p}" for p in sequence))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a resource state from standard input and check it for safety."""
    parser = argparse.ArgumentParser(
        prog="ossim-bankers", description="Check a system state with the banker's algorithm."
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="read total instances instead of available ones and list every safe sequence",
    )
    args = parser.parse_args(argv)
    try:
        _run(_Reader(sys.stdin), args.all)
    except ValueError as exc:
        print(f"Exception: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())