"""CPU scheduling: FCFS, SJF, SRTF, round robin and priority scheduling."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Iterator, Sequence


@dataclass(frozen=True)
class Process:
    """A process to schedule; a lower priority number means more urgent."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"P{self.pid}: arrival time must not be negative")
        if self.burst <= 0:
            raise ValueError(f"P{self.pid}: burst time must be positive")


@dataclass(frozen=True)
class ProcessResult:
    """Timing of one process once the schedule has run."""

    pid: int
    arrival: int
    burst: int
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


@dataclass
class ScheduleResult:
    """Per-process results plus the order in which the CPU ran them."""

    name: str
    results: list[ProcessResult]
    gantt: list[int] = field(default_factory=list)

    def average_waiting(self) -> float:
        return sum(r.waiting for r in self.results) / len(self.results)

    def average_turnaround(self) -> float:
        return sum(r.turnaround for r in self.results) / len(self.results)


def _checked(processes: Iterable[Process]) -> list[Process]:
    procs = list(processes)
    if not procs:
        raise ValueError("at least one process is required")
    return procs


def _checked_quantum(quantum: int) -> int:
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    return quantum


def _results(procs: Sequence[Process], completion: Sequence[int]) -> list[ProcessResult]:
    return [
        ProcessResult(p.pid, p.arrival, p.burst, done)
        for p, done in zip(procs, completion)
    ]


def fcfs(processes: Iterable[Process]) -> ScheduleResult:
    """First come, first served; results are listed in arrival order."""
    ordered = sorted(_checked(processes), key=lambda p: p.arrival)
    time = 0
    completion = []
    for p in ordered:
        time = max(time, p.arrival) + p.burst
        completion.append(time)
    return ScheduleResult("FCFS", _results(ordered, completion), [p.pid for p in ordered])


def _non_preemptive(
    name: str, processes: Iterable[Process], key: Callable[[Process], int]
) -> ScheduleResult:
    procs = _checked(processes)
    pending = list(range(len(procs)))
    completion = [0] * len(procs)
    gantt: list[int] = []
    time = 0
    while pending:
        ready = [i for i in pending if procs[i].arrival <= time]
        if not ready:
            time = min(procs[i].arrival for i in pending)
            continue
        chosen = min(ready, key=lambda i: key(procs[i]))
        time += procs[chosen].burst
        completion[chosen] = time
        pending.remove(chosen)
        gantt.append(procs[chosen].pid)
    return ScheduleResult(name, _results(procs, completion), gantt)


def sjf_non_preemptive(processes: Iterable[Process]) -> ScheduleResult:
    """Shortest job first without preemption; ties go to the earlier process."""
    return _non_preemptive("Non-Preemptive SJF", processes, lambda p: p.burst)


def priority_scheduling(processes: Iterable[Process]) -> ScheduleResult:
    """Non-preemptive priority scheduling; the lowest number runs first."""
    return _non_preemptive("Priority", processes, lambda p: p.priority)


def sjf_preemptive(processes: Iterable[Process]) -> ScheduleResult:
    """Shortest remaining time first, decided one time unit at a time."""
    procs = _checked(processes)
    remaining = [p.burst for p in procs]
    completion = [0] * len(procs)
    gantt: list[int] = []
    time = 0
    while any(remaining):
        ready = [
            i for i, p in enumerate(procs) if p.arrival <= time and remaining[i] > 0
        ]
        if not ready:
            time = min(p.arrival for i, p in enumerate(procs) if remaining[i] > 0)
            continue
        chosen = min(ready, key=remaining.__getitem__)
        remaining[chosen] -= 1
        time += 1
        gantt.append(procs[chosen].pid)
        if remaining[chosen] == 0:
            completion[chosen] = time
    return ScheduleResult("Preemptive SJF", _results(procs, completion), gantt)


def round_robin(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Round robin that sweeps the process list in order, pass after pass."""
    procs = _checked(processes)
    _checked_quantum(quantum)
    remaining = [p.burst for p in procs]
    completion = [0] * len(procs)
    gantt: list[int] = []
    time = 0
    while any(remaining):
        ran = False
        for i, p in enumerate(procs):
            if remaining[i] > 0 and p.arrival <= time:
                ran = True
                run = min(quantum, remaining[i])
                time += run
                remaining[i] -= run
                gantt.append(p.pid)
                if remaining[i] == 0:
                    completion[i] = time
        if not ran:
            time = min(p.arrival for i, p in enumerate(procs) if remaining[i] > 0)
    return ScheduleResult("Round Robin", _results(procs, completion), gantt)


def round_robin_queue(processes: Iterable[Process], quantum: int) -> ScheduleResult:
    """Round robin with a ready queue; results are listed in arrival order."""
    ordered = sorted(_checked(processes), key=lambda p: p.arrival)
    _checked_quantum(quantum)
    remaining = [p.burst for p in ordered]
    completion = [0] * len(ordered)
    gantt: list[int] = []
    queue = deque([0])
    upcoming = 1
    time = 0
    while queue:
        current = queue.popleft()
        proc = ordered[current]
        time = max(time, proc.arrival)
        run = min(quantum, remaining[current])
        time += run
        remaining[current] -= run
        gantt.append(proc.pid)
        if remaining[current] == 0:
            completion[current] = time
        while upcoming < len(ordered) and ordered[upcoming].arrival <= time:
            queue.append(upcoming)
            upcoming += 1
        if remaining[current] > 0:
            queue.append(current)
        if not queue and upcoming < len(ordered):
            queue.append(upcoming)
            upcoming += 1
    return ScheduleResult(
        f"Round Robin (Quantum = {quantum})", _results(ordered, completion), gantt
    )


def format_results(schedule: ScheduleResult) -> str:
    """Render the results table with average waiting and turnaround times."""
    lines = [
        "Process Id   Arrival Time   Burst Time   Completion Time   "
        "TurnAround Time   Waiting Time"
    ]
    lines.extend(
        f" P{r.pid}\t\t{r.arrival}\t\t{r.burst}\t\t{r.completion}"
        f"\t\t{r.turnaround}\t\t{r.waiting}"
        for r in schedule.results
    )
    lines.append(f"Average Waiting Time = {schedule.average_waiting():g}")
    lines.append(f"Average TurnAround Time = {schedule.average_turnaround():g}")
    return "\n".join(lines)


def format_gantt(schedule: ScheduleResult) -> str:
    """Render the order of execution as a one-line chart."""
    return "Gantt Chart: " + " ".join(f"P{pid}" for pid in schedule.gantt)


class InputError(Exception):
    """Raised when interactive input cannot be read."""


class _Reader:
    def __init__(self, stream) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def integer(self, prompt: str, error: str) -> int:
        print(prompt, end="", flush=True)
        try:
            return int(next(self._tokens))
        except (StopIteration, ValueError):
            raise InputError(error) from None


_MENU = """
Choose Scheduling Algorithm:
1. First Come First Serve (FCFS)
2. Shortest Job First (Non-Preemptive)
3. Shortest Job First (Preemptive)
4. Round Robin
5. Round Robin (Ready Queue)
6. Priority Scheduling
7. Exit"""


def _read_processes(reader: _Reader) -> list[Process]:
    count = reader.integer(
        "Enter the number of processes: ", "Invalid input for number of processes."
    )
    if count <= 0:
        raise InputError("Invalid input for number of processes.")
    processes = []
    for pid in range(1, count + 1):
        prompt = f"Enter Arrival Time and Burst Time for P{pid}: "
        arrival = reader.integer(prompt, "Invalid Arrival or Burst Time.")
        burst = reader.integer("", "Invalid Arrival or Burst Time.")
        try:
            processes.append(Process(pid, arrival, burst))
        except ValueError:
            raise InputError("Invalid Arrival or Burst Time.") from None
    return processes


def _show(schedule: ScheduleResult) -> None:
    print(f"\n{schedule.name} Scheduling")
    print(format_results(schedule))
    print(format_gantt(schedule))


def _menu(reader: _Reader) -> None:
    processes = _read_processes(reader)
    while True:
        print(_MENU)
        choice = reader.integer("Enter your choice: ", "Invalid input for choice.")
        if choice == 1:
            _show(fcfs(processes))
        elif choice == 2:
            _show(sjf_non_preemptive(processes))
        elif choice == 3:
            _show(sjf_preemptive(processes))
        elif choice in (4, 5):
            quantum = reader.integer("Enter time quantum: ", "Invalid time quantum.")
            if quantum <= 0:
                raise InputError("Invalid time quantum.")
            algorithm = round_robin if choice == 4 else round_robin_queue
            _show(algorithm(processes, quantum))
        elif choice == 6:
            print("Enter priority of all the processes: ", end="")
            processes = [
                replace(p, priority=reader.integer("", "Invalid input for priority."))
                for p in processes
            ]
            _show(priority_scheduling(processes))
        elif choice == 7:
            print("Exiting...")
            return
        else:
            print("Invalid choice. Try again.")


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive CPU scheduling simulator reading from standard input."""
    parser = argparse.ArgumentParser(
        prog="ossim-cpu", description="Simulate CPU scheduling algorithms."
    )
    parser.parse_args(argv)
    try:
        _menu(_Reader(sys.stdin))
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())