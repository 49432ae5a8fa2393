"""Readers-writers simulations over a shared balance and a shared counter."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence


class ReadersWriterLock:
    """Readers-preference lock: any number of readers or a single writer."""

    def __init__(self) -> None:
        self._count_lock = threading.Lock()
        self._resource = threading.Semaphore(1)
        self._readers = 0
        self._writer = False

    def acquire_read(self) -> None:
        with self._count_lock:
            self._readers += 1
            if self._readers == 1:
                self._resource.acquire()

    def release_read(self) -> None:
        with self._count_lock:
            if self._readers == 0:
                raise RuntimeError("read lock is not held")
            self._readers -= 1
            if self._readers == 0:
                self._resource.release()

    def acquire_write(self) -> None:
        self._resource.acquire()
        self._writer = True

    def release_write(self) -> None:
        if not self._writer:
            raise RuntimeError("write lock is not held")
        self._writer = False
        self._resource.release()

    @contextmanager
    def reading(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def writing(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


@dataclass
class Account:
    """A shared bank balance with a log of what the threads saw and did."""

    balance: int = 2000
    echo: bool = False
    log: list[str] = field(default_factory=list)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def record(self, message: str) -> None:
        with self._lock:
            self.log.append(message)
            if self.echo:
                print(message, flush=True)


def _check(readers: int, writers: int, delay: float, *repeats: int) -> None:
    if readers < 0 or writers < 0:
        raise ValueError("number of readers and writers must not be negative")
    if any(r < 0 for r in repeats):
        raise ValueError("repeat counts must not be negative")
    if delay < 0:
        raise ValueError("delay must not be negative")


def _pause(seconds: float) -> None:
    if seconds > 0:
        time.sleep(seconds)


def _start_all(
    target: Callable[[int], None], count: int, kind: str, stagger: float = 0.0
) -> list[threading.Thread]:
    threads = []
    for ident in range(1, count + 1):
        thread = threading.Thread(target=target, args=(ident,), name=f"{kind}-{ident}")
        thread.start()
        threads.append(thread)
        _pause(stagger)
    return threads


def _join_all(threads: Sequence[threading.Thread]) -> None:
    for thread in threads:
        thread.join()


def run_synchronized(
    account: Account,
    readers: int = 5,
    writers: int = 5,
    read_times: int = 3,
    write_times: int = 1,
    delay: float = 1.0,
) -> int:
    """Run readers and writers under a readers-writer lock; return the balance.

    Each writer adds its id times 25 on every write. ``delay`` scales the
    simulated reading and writing times; 0 runs without sleeping.
    """
    _check(readers, writers, delay, read_times, write_times)
    lock = ReadersWriterLock()

    def reader(ident: int) -> None:
        for _ in range(read_times):
            with lock.reading():
                account.record(
                    f"[Reader ID = {ident}] Current Balance: ${account.balance}"
                )
                _pause(0.4 * delay)
            _pause(0.5 * delay)

    def writer(ident: int) -> None:
        for _ in range(write_times):
            with lock.writing():
                amount = ident * 25
                account.balance += amount
                account.record(
                    f"[Writer ID = {ident}] UPDATED BALANCE = ${account.balance}"
                    f" (+${amount})"
                )
                _pause(0.9 * delay)
            _pause(0.5 * delay)

    threads = _start_all(reader, readers, "reader") + _start_all(
        writer, writers, "writer"
    )
    _join_all(threads)
    return account.balance


def run_unsynchronized(
    account: Account,
    readers: int = 5,
    writers: int = 5,
    read_times: int = 3,
    write_times: int = 1,
    delay: float = 1.0,
) -> int:
    """Run readers and writers with no locking at all; return the balance.

    Each writer adds its id times 100 on every write, and reports the balance
    only after a pause, so readings and reports may be inconsistent.
    """
    _check(readers, writers, delay, read_times, write_times)

    def reader(ident: int) -> None:
        for _ in range(read_times):
            account.record(f"[Reader ID = {ident}] BALANCE = ${account.balance}")
            _pause(0.7 * delay)

    def writer(ident: int) -> None:
        for _ in range(write_times):
            _pause(0.1 * delay)
            amount = ident * 100
            account.balance += amount
            _pause(0.2 * delay)
            account.record(
                f"[Writer ID = {ident}] UPDATED BALANCE = ${account.balance}"
                f" (+${amount})"
            )
            _pause(1.0 * delay)

    threads = _start_all(reader, readers, "reader") + _start_all(
        writer, writers, "writer"
    )
    _join_all(threads)
    return account.balance


def run_shared_counter(
    readers: int, writers: int, synchronized: bool = True, delay: float = 1.0
) -> tuple[int, list[str]]:
    """Writers each add 10 to a counter that readers print.

    Without synchronization a writer copies the value, sleeps and writes the
    copy back, so updates can be lost. Returns the final value and the log.
    """
    _check(readers, writers, delay)
    lock = ReadersWriterLock()
    log_lock = threading.Lock()
    log: list[str] = []
    data = 0

    def record(message: str) -> None:
        with log_lock:
            log.append(message)

    def sync_reader(ident: int) -> None:
        with lock.reading():
            record(f"[Reader {ident}] Reading data: {data}")
            _pause(0.1 * delay)

    def sync_writer(ident: int) -> None:
        nonlocal data
        with lock.writing():
            data += 10
            record(f">>> [Writer {ident}] Writing data: {data}")
            _pause(0.15 * delay)

    def async_reader(ident: int) -> None:
        _pause(0.05 * delay)
        record(f"[Reader {ident}] Reading data: {data}")

    def async_writer(ident: int) -> None:
        nonlocal data
        local_copy = data + 10
        _pause(0.1 * delay)
        data = local_copy
        record(f">>> [Writer {ident}] Writing data: {data}")

    if synchronized:
        reader, writer, stagger = sync_reader, sync_writer, 0.05 * delay
    else:
        reader, writer, stagger = async_reader, async_writer, 0.03 * delay
    writer_threads = _start_all(writer, writers, "writer", stagger)
    reader_threads = _start_all(reader, readers, "reader", stagger)
    _join_all(writer_threads)
    _join_all(reader_threads)
    return data, log


def _ask_mode() -> str | None:
    print(
        "Choose Mode: 1 Synchronized  2 Unsynchronized\nPlease enter the choice (1/2): ",
        end="",
        flush=True,
    )
    answer = sys.stdin.readline().strip()
    return {"1": "sync", "2": "unsync"}.get(answer)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a readers-writers simulation and print what the threads did."""
    parser = argparse.ArgumentParser(
        prog="ossim-rw", description="Simulate readers and writers on shared data."
    )
    parser.add_argument("mode", nargs="?", choices=["sync", "unsync"])
    parser.add_argument(
        "--counter", action="store_true", help="use the shared counter simulation"
    )
    parser.add_argument("--readers", type=int, default=5)
    parser.add_argument("--writers", type=int, default=5)
    parser.add_argument("--read-times", type=int, default=3)
    parser.add_argument("--write-times", type=int, default=1)
    parser.add_argument(
        "--delay", type=float, default=1.0, help="scale factor for simulated work"
    )
    args = parser.parse_args(argv)

    mode = args.mode or _ask_mode()
    if mode is None:
        print("\nInvalid Choice! Please restart the program.")
        return 1
    synchronized = mode == "sync"
    try:
        if args.counter:
            final, log = run_shared_counter(
                args.readers, args.writers, synchronized, args.delay
            )
            for line in log:
                print(line)
            print(f"\nFinal value of shared data: {final}")
            return 0
        account = Account(echo=True)
        if synchronized:
            print("\nRunning Synchronized Execution...")
            run_synchronized(
                account, args.readers, args.writers,
                args.read_times, args.write_times, args.delay,
            )
            print("\nSynchronized Execution Completed!")
        else:
            print("\nRunning Unsynchronized Execution...")
            run_unsynchronized(
                account, args.readers, args.writers,
                args.read_times, args.write_times, args.delay,
            )
            print("\nUnsynchronized Execution Completed (May Be Inconsistent)!")
    except ValueError as exc:
        print(f"[Main Error] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())