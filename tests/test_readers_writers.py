import threading

import pytest

from ossim.readers_writers import (
    Account,
    ReadersWriterLock,
    main,
    run_shared_counter,
    run_synchronized,
    run_unsynchronized,
)


def _try_in_thread(action):
    done = threading.Event()

    def work():
        action()
        done.set()

    thread = threading.Thread(target=work, daemon=True)
    thread.start()
    return thread, done


def test_writer_waits_for_all_readers():
    lock = ReadersWriterLock()
    lock.acquire_read()
    lock.acquire_read()
    thread, done = _try_in_thread(lock.acquire_write)
    assert not done.wait(0.1)
    lock.release_read()
    assert not done.wait(0.1)
    lock.release_read()
    assert done.wait(2)
    lock.release_write()
    thread.join(2)


def test_writer_excludes_other_writer():
    lock = ReadersWriterLock()
    lock.acquire_write()
    thread, done = _try_in_thread(lock.acquire_write)
    assert not done.wait(0.1)
    lock.release_write()
    assert done.wait(2)
    lock.release_write()
    thread.join(2)


def test_writer_excludes_reader():
    lock = ReadersWriterLock()
    with lock.writing():
        thread, done = _try_in_thread(lock.acquire_read)
        assert not done.wait(0.1)
    assert done.wait(2)
    lock.release_read()
    thread.join(2)


def test_release_without_acquire_raises():
    lock = ReadersWriterLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_synchronized_balance_and_log():
    account = Account()
    final = run_synchronized(account, 3, 4, 2, 1, delay=0)
    assert final == 2000 + 25 * sum(range(1, 5))
    assert account.balance == final
    assert len(account.log) == 3 * 2 + 4
    writes = [line for line in account.log if "UPDATED BALANCE" in line]
    assert len(writes) == 4
    assert "[Writer ID = 2] UPDATED BALANCE" in " ".join(writes)


def test_synchronized_readers_see_written_values():
    account = Account(balance=0)
    run_synchronized(account, 2, 2, 3, 2, delay=0)
    seen = [
        int(line.rsplit("$", 1)[1])
        for line in account.log
        if "Current Balance" in line
    ]
    assert len(seen) == 6
    assert all(0 <= value <= account.balance for value in seen)


def test_unsynchronized_logs_every_action():
    account = Account()
    final = run_unsynchronized(account, 2, 3, 2, 1, delay=0)
    assert final >= 2000
    assert len(account.log) == 2 * 2 + 3
    assert sum("BALANCE = $" in line for line in account.log) == 7


def test_shared_counter_synchronized_counts_every_write():
    final, log = run_shared_counter(3, 4, synchronized=True, delay=0)
    assert final == 10 * 4
    assert len(log) == 7
    assert sum(line.startswith(">>> [Writer") for line in log) == 4


def test_shared_counter_unsynchronized_may_lose_updates():
    final, log = run_shared_counter(2, 3, synchronized=False, delay=0.01)
    assert 10 <= final <= 30
    assert final % 10 == 0
    assert len(log) == 5


def test_negative_arguments_rejected():
    with pytest.raises(ValueError):
        run_synchronized(Account(), -1, 1, 1, 1, delay=0)
    with pytest.raises(ValueError):
        run_shared_counter(1, 1, delay=-1)


def test_main_synchronized(capsys):
    code = main(["sync", "--delay", "0", "--readers", "2", "--writers", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Synchronized Execution Completed!" in out
    assert "[Reader ID = 1] Current Balance: $" in out


def test_main_counter(capsys):
    code = main(["sync", "--counter", "--delay", "0", "--readers", "1", "--writers", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Final value of shared data: 30" in out