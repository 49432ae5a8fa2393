import io

import pytest

from ossim.page_replacement import (
    ReplacementResult,
    Step,
    fifo,
    format_steps,
    lru,
    main,
    optimal,
)

REFERENCE = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]
BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def test_fifo_belady_anomaly():
    assert fifo(BELADY, 3).faults() == 9
    assert fifo(BELADY, 4).faults() == 10


def test_lru_evicts_least_recently_used():
    result = lru([1, 2, 1, 3], 2)
    assert result.steps[-1].frames == (1, 3)


def test_fifo_evicts_oldest_loaded():
    result = fifo([1, 2, 1, 3], 2)
    assert result.steps[-1].frames[0] == 3
    assert result.steps[-1].frames[1] == 2


@pytest.mark.parametrize("frames", [1, 2, 3, 4])
def test_trace_invariants(frames):
    results = (
        fifo(REFERENCE, frames),
        lru(REFERENCE, frames),
        optimal(REFERENCE, frames),
    )
    for result in results:
        assert len(result.steps) == len(REFERENCE)
        previous: tuple = ()
        for page, step in zip(REFERENCE, result.steps):
            assert step.page == page
            assert page in step.frames
            assert len(step.frames) <= frames
            assert step.hit == (page in previous)
            if step.hit:
                assert step.frames == previous
            previous = step.frames


def test_faults_at_least_distinct_pages():
    distinct = len(set(REFERENCE))
    assert fifo(REFERENCE, 3).faults() >= distinct
    assert lru(REFERENCE, 3).faults() >= distinct
    assert optimal(REFERENCE, 3).faults() >= distinct


def test_enough_frames_only_compulsory_faults():
    distinct = len(set(REFERENCE))
    assert fifo(REFERENCE, distinct).faults() == distinct
    assert lru(REFERENCE, distinct).faults() == distinct
    assert optimal(REFERENCE, distinct).faults() == distinct


@pytest.mark.parametrize("frames", [1, 2, 3, 4, 5])
def test_optimal_is_never_worse(frames):
    best = optimal(REFERENCE, frames).faults()
    assert best <= fifo(REFERENCE, frames).faults()
    assert best <= lru(REFERENCE, frames).faults()


def test_single_frame_faults_on_every_change():
    pages = [1, 1, 2, 2, 1]
    changes = sum(a != b for a, b in zip(pages, pages[1:])) + 1
    assert fifo(pages, 1).faults() == changes
    assert lru(pages, 1).faults() == changes
    assert optimal(pages, 1).faults() == changes


def test_rejects_non_positive_frame_count():
    with pytest.raises(ValueError):
        fifo([1, 2], 0)
    with pytest.raises(ValueError):
        lru([1, 2], 0)
    with pytest.raises(ValueError):
        optimal([1, 2], 0)


def test_faults_counts_misses():
    result = ReplacementResult(2, [Step(1, (1,), False), Step(1, (1,), True)])
    assert result.faults() == 1


def test_format_steps():
    result = fifo([1, 1], 2)
    lines = format_steps(result, "FCFS").splitlines()
    assert lines[0] == "--- FCFS Page Replacement Step-by-Step ---"
    assert lines[1] == "Page: 1 --> [ 1 ] --> Page Fault"
    assert lines[2] == "Page: 1 --> [ 1 ] --> Hit"
    assert lines[3] == f"Total Page Faults using FCFS: {result.faults()}"


def test_main_runs_menu(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n4\n1 2 3 1\n2\n3\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Please enter the page reference string first." in out
    assert "Total Page Faults using LRU:" in out
    assert "Exiting program." in out


def test_main_fails_on_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n1 2\n"))
    assert main([]) == 1