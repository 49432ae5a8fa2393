# ossim

Small, readable simulations of the algorithms taught in an operating-systems
course. Every algorithm is a plain function you can call from Python, and each
topic also has a command-line tool.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command-line tools

| Command         | What it does |
|-----------------|--------------|
| `ossim-cpu`     | Interactive CPU scheduling: FCFS, SJF (non-preemptive), SJF (preemptive), Round Robin, Round Robin with a ready queue, priority scheduling |
| `ossim-pages`   | Interactive page replacement: FIFO, LRU, optimal, with a step-by-step trace |
| `ossim-bankers` | Reads Max, Allocation and Available from standard input and prints a safe sequence; with `--all` it reads total instances instead, prints a step-by-step trace of the first safe sequence and lists every safe sequence |
| `ossim-memory`  | Interactive memory allocation: first, best, worst and next fit, with internal fragmentation |
| `ossim-disk`    | Interactive disk scheduling: FCFS, SSTF, SCAN, C-SCAN, and SCAN / C-SCAN with a chosen direction |
| `ossim-rw`      | Readers-writers simulation; `ossim-rw sync` or `ossim-rw unsync` (asks when omitted), with `--counter`, `--readers`, `--writers`, `--read-times`, `--write-times` and `--delay` |
| `ossim-files`   | File tools: subcommands `copy`, `count`, `grep`, `ls`, `upper` and `run`; with no subcommand, an interactive menu |
| `ossim-copy`    | Copy one file to another |
| `ossim-grep`    | Print `found` once for every line of a file that contains a word |
| `ossim-pipe`    | Send a message to a child process and print the upper-cased reply |

The interactive tools read whitespace-separated answers from standard input,
so they can also be driven by a pipe:

```
printf '3\n0 5\n1 3\n2 8\n1\n7\n' | ossim-cpu
```

`ossim-files run SRC DEST FILE WORD` copies `SRC` to `DEST` in one child
process while a second child process greps `FILE` for `WORD`, and reports
whether both succeeded.

`ossim-rw --delay 0` runs the simulation without sleeping; the default of 1.0
keeps the timings that make the interleavings visible.

## Library use

- `ossim.cpu_scheduling` — `fcfs`, `sjf_non_preemptive`, `sjf_preemptive`,
  `round_robin`, `round_robin_queue` and `priority_scheduling` take `Process`
  objects (`pid`, `arrival`, `burst`, `priority`) and return a
  `ScheduleResult` with per-process `ProcessResult`s, a `gantt` list and
  `average_waiting()` / `average_turnaround()`; `format_results` and
  `format_gantt` render it as text.
- `ossim.page_replacement` — `fifo`, `lru` and `optimal` take a page reference
  string and a frame count and return a `ReplacementResult` of `Step`s with
  `faults()`; `format_steps` renders the trace.
- `ossim.bankers` — `compute_need`, `remaining_available`, `safe_sequence`
  (raises `UnsafeStateError` when no safe sequence exists),
  `all_safe_sequences` (a generator) and `execution_steps`, which returns
  `ExecutionStep`s.
- `ossim.memory_fit` — `first_fit`, `best_fit`, `worst_fit` and `next_fit`
  return a list of `Allocation`s; `total_fragmentation` and
  `format_allocations` summarise them.
- `ossim.disk_scheduling` — `fcfs`, `sstf`, `scan` and `cscan`, plus
  `scan_directional` and `cscan_directional`, which take a `Direction` (or
  `"left"` / `"right"`) and check that the head and requests lie on the disk;
  each returns a `SeekResult` with `order`, `seek` and `path()`.
- `ossim.readers_writers` — a `ReadersWriterLock` with `reading()` and
  `writing()` context managers, an `Account`, and `run_synchronized`,
  `run_unsynchronized` and `run_shared_counter`.
- `ossim.file_tools` — `copy_file`, `grep_lines`, `count_word`,
  `list_directory`, `uppercase_via_child` and `run_copy_and_grep`.

```python
from ossim.bankers import compute_need, safe_sequence, UnsafeStateError
from ossim.memory_fit import best_fit, total_fragmentation

maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
need = compute_need(maximum, allocation)

try:
    print(safe_sequence(allocation, need, [3, 3, 2]))
except UnsafeStateError as error:
    print("unsafe:", error)

allocations = best_fit([100, 500, 200, 300, 600], [212, 417, 112, 426])
print(total_fragmentation(allocations))
```

## What it does not do

The file tools work in Python rather than by starting system commands:
`ls` lists a directory with `list_directory` (sorted, hidden names left out),
and the child processes of `run` and `upper` are Python processes, not
separate executables.