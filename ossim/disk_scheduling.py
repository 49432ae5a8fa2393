"""Disk scheduling: FCFS, SSTF, SCAN and C-SCAN seek-time simulation."""

from __future__ import annotations

import argparse
import enum
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence


class Direction(enum.Enum):
    """Initial direction of the head sweep."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class SeekResult:
    """The requests in the order they were served and the total head travel."""

    head: int
    order: list[int] = field(default_factory=list)
    seek: int = 0

    def path(self) -> str:
        return f"{self.head} -> " + " ".join(str(r) for r in self.order)


class _Head:
    def __init__(self, start: int) -> None:
        self.position = start
        self.seek = 0
        self.order: list[int] = []

    def serve(self, requests: Iterable[int]) -> None:
        for request in requests:
            self.move_to(request)
            self.order.append(request)

    def move_to(self, track: int) -> None:
        self.seek += abs(track - self.position)
        self.position = track

    def jump_to(self, track: int, cost: int) -> None:
        self.seek += cost
        self.position = track

    def result(self, start: int) -> SeekResult:
        return SeekResult(start, self.order, self.seek)


def fcfs(requests: Iterable[int], head: int) -> SeekResult:
    """Serve requests in the order they were given."""
    mover = _Head(head)
    mover.serve(requests)
    return mover.result(head)


def sstf(requests: Iterable[int], head: int) -> SeekResult:
    """Always serve the nearest pending request; ties go to the earlier one."""
    pending = list(requests)
    mover = _Head(head)
    while pending:
        nearest = min(pending, key=lambda r: abs(r - mover.position))
        pending.remove(nearest)
        mover.serve([nearest])
    return mover.result(head)


def _split(requests: Iterable[int], head: int) -> tuple[list[int], list[int]]:
    requests = list(requests)
    lower = sorted(r for r in requests if r < head)
    upper = sorted(r for r in requests if r >= head)
    return lower, upper


def scan(requests: Iterable[int], head: int, disk_size: int) -> SeekResult:
    """Sweep upwards, then run to the last track and charge the return sweep.

    When requests lie below the head, the travel from the last track to the
    highest of them is counted once on reversal and again when it is served.
    """
    lower, upper = _split(requests, head)
    mover = _Head(head)
    mover.serve(upper)
    if lower:
        end = disk_size - 1
        mover.move_to(end)
        mover.jump_to(end, abs(end - lower[-1]))
        mover.serve(reversed(lower))
    return mover.result(head)


def cscan(requests: Iterable[int], head: int, disk_size: int) -> SeekResult:
    """Sweep upwards, jump from the last track to track 0, sweep up again."""
    lower, upper = _split(requests, head)
    mover = _Head(head)
    mover.serve(upper)
    if lower:
        mover.move_to(disk_size - 1)
        mover.jump_to(0, disk_size - 1)
        mover.serve(lower)
    return mover.result(head)


def _check_bounds(requests: Sequence[int], head: int, tracks: int) -> None:
    if tracks <= 0:
        raise ValueError("number of tracks must be positive")
    if not 0 <= head < tracks:
        raise ValueError("Head position out of bounds!")
    if any(not 0 <= r < tracks for r in requests):
        raise ValueError("Request out of bounds!")


def scan_directional(
    requests: Iterable[int], head: int, tracks: int, direction: Direction | str
) -> SeekResult:
    """Sweep to the disk edge in the given direction, then reverse."""
    direction = Direction(direction)
    requests = list(requests)
    _check_bounds(requests, head, tracks)
    lower, upper = _split(requests, head)
    mover = _Head(head)
    if direction is Direction.RIGHT:
        mover.serve(upper)
        mover.move_to(tracks - 1)
        mover.serve(reversed(lower))
    else:
        mover.serve(reversed(lower))
        mover.move_to(0)
        mover.serve(upper)
    return mover.result(head)


def cscan_directional(
    requests: Iterable[int], head: int, tracks: int, direction: Direction | str
) -> SeekResult:
    """Sweep to the disk edge, jump to the opposite edge, continue the same way."""
    direction = Direction(direction)
    requests = list(requests)
    _check_bounds(requests, head, tracks)
    lower, upper = _split(requests, head)
    mover = _Head(head)
    if direction is Direction.RIGHT:
        mover.serve(upper)
        mover.move_to(tracks - 1)
        mover.jump_to(0, tracks - 1)
        mover.serve(lower)
    else:
        mover.serve(reversed(lower))
        mover.move_to(0)
        mover.jump_to(tracks - 1, tracks - 1)
        mover.serve(reversed(upper))
    return mover.result(head)


class _Reader:
    def __init__(self, stream) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def token(self, prompt: str, what: str) -> str:
        print(prompt, end="", flush=True)
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError(f"Invalid input for {what}") from None

    def integer(self, prompt: str, what: str) -> int:
        token = self.token(prompt, what)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"Invalid input for {what}") from None


_MENU = """
1. FCFS
2. SSTF
3. SCAN
4. C-SCAN
5. SCAN (choose direction)
6. C-SCAN (choose direction)
7. Exit"""


def _menu(reader: _Reader) -> None:
    count = reader.integer("Enter number of requests: ", "number of requests")
    if count < 0:
        raise ValueError("Invalid input for number of requests")
    print("Enter the requests: ", end="", flush=True)
    requests = [reader.integer("", "request values") for _ in range(count)]
    head = reader.integer("Enter head: ", "head")
    disk = reader.integer("Enter the Disk size: ", "disk size")
    simple = {1: ("FCFS", fcfs), 2: ("SSTF", sstf)}
    sweeping = {3: ("SCAN", scan), 4: ("C-SCAN", cscan)}
    directional = {5: ("SCAN", scan_directional), 6: ("CSCAN", cscan_directional)}
    while True:
        print(_MENU)
        choice = reader.integer("Enter the Choice: ", "choice")
        if choice == 7:
            print("Exit")
            return
        if choice in simple:
            name, algorithm = simple[choice]
            result = algorithm(requests, head)
        elif choice in sweeping:
            name, algorithm = sweeping[choice]
            result = algorithm(requests, head, disk)
        elif choice in directional:
            name, algorithm = directional[choice]
            word = reader.token("Enter direction (left/right): ", "direction")
            try:
                direction = Direction(word)
            except ValueError:
                print(f"Invalid direction for {name}. Please choose 'left' or 'right'.")
                continue
            try:
                result = algorithm(requests, head, disk, direction)
            except ValueError as exc:
                print(f"Error: {exc}")
                continue
            print(result.path())
            print(f"Total Seek Time ({name} - {direction.value}): {result.seek}")
            continue
        else:
            print("Enter Valid Choice!!")
            continue
        print(result.path())
        print(f"{name} Seek time = {result.seek}")


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive disk scheduling simulator reading from standard input."""
    parser = argparse.ArgumentParser(
        prog="ossim-disk", description="Simulate disk scheduling algorithms."
    )
    parser.parse_args(argv)
    try:
        _menu(_Reader(sys.stdin))
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())