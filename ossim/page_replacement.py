"""Page replacement: FIFO, LRU and optimal, with step-by-step traces."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence


@dataclass(frozen=True)
class Step:
    """One page reference and the frame contents after it was served."""

    page: int
    frames: tuple[int, ...]
    hit: bool


@dataclass
class ReplacementResult:
    """The full trace of a page replacement run."""

    frame_count: int
    steps: list[Step] = field(default_factory=list)

    def faults(self) -> int:
        return sum(not step.hit for step in self.steps)


def _run(
    pages: Sequence[int],
    frame_count: int,
    choose_victim: Callable[[int, list[int]], int],
    on_access: Callable[[int, int], None] = lambda index, page: None,
) -> ReplacementResult:
    if frame_count <= 0:
        raise ValueError("frame count must be positive")
    result = ReplacementResult(frame_count)
    frames: list[int] = []
    for index, page in enumerate(pages):
        hit = page in frames
        if not hit:
            if len(frames) < frame_count:
                frames.append(page)
            else:
                frames[choose_victim(index, frames)] = page
        on_access(index, page)
        result.steps.append(Step(page, tuple(frames), hit))
    return result


def fifo(pages: Sequence[int], frame_count: int) -> ReplacementResult:
    """Replace the page that was loaded earliest."""
    pointer = 0

    def victim(index: int, frames: list[int]) -> int:
        nonlocal pointer
        chosen = pointer
        pointer = (pointer + 1) % frame_count
        return chosen

    return _run(pages, frame_count, victim)


def lru(pages: Sequence[int], frame_count: int) -> ReplacementResult:
    """Replace the page whose last use lies furthest in the past."""
    last_used: dict[int, int] = {}

    def victim(index: int, frames: list[int]) -> int:
        return min(range(len(frames)), key=lambda j: last_used.get(frames[j], 0))

    def touch(index: int, page: int) -> None:
        last_used[page] = index

    return _run(pages, frame_count, victim, touch)


def optimal(pages: Sequence[int], frame_count: int) -> ReplacementResult:
    """Replace the page whose next use lies furthest in the future."""
    pages = list(pages)

    def next_use(page: int, after: int) -> int:
        try:
            return pages.index(page, after + 1)
        except ValueError:
            return len(pages)

    def victim(index: int, frames: list[int]) -> int:
        return max(range(len(frames)), key=lambda j: next_use(frames[j], index))

    return _run(pages, frame_count, victim)


def format_steps(result: ReplacementResult, name: str) -> str:
    """Render the trace, one reference per line, with the fault total."""
    lines = [f"--- {name} Page Replacement Step-by-Step ---"]
    for step in result.steps:
        frames = "".join(f"{value} " for value in step.frames)
        outcome = "Hit" if step.hit else "Page Fault"
        lines.append(f"Page: {step.page} --> [ {frames}] --> {outcome}")
    lines.append(f"Total Page Faults using {name}: {result.faults()}")
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
Menu:
1. Enter page reference string
2. FCFS Algorithm
3. LRU Algorithm
4. Optimal Algorithm
0. Exit"""

_ALGORITHMS = {2: ("FCFS", fifo), 3: ("LRU", lru), 4: ("Optimal", optimal)}


def _menu(reader: _Reader) -> None:
    pages: list[int] = []
    frame_count = 0
    print("===== Page Replacement Algorithms =====")
    while True:
        print(_MENU)
        choice = reader.integer(
            "Enter your choice: ", "Invalid choice! Try again: ", lambda v: 0 <= v <= 4
        )
        if choice == 0:
            print("Exiting program.")
            return
        if choice == 1:
            positive = "Invalid input! Enter a positive integer: "
            count = reader.integer(
                "Enter number of page references: ", positive, lambda v: v > 0
            )
            print("Enter the page reference string (space separated):")
            pages = [
                reader.integer("", "Invalid input! Enter an integer: ")
                for _ in range(count)
            ]
            frame_count = reader.integer(
                "Enter number of frames: ", positive, lambda v: v > 0
            )
        elif not pages:
            print("Please enter the page reference string first.")
        else:
            name, algorithm = _ALGORITHMS[choice]
            print()
            print(format_steps(algorithm(pages, frame_count), name))


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive page replacement simulator reading from standard input."""
    parser = argparse.ArgumentParser(
        prog="ossim-pages", description="Simulate page replacement algorithms."
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