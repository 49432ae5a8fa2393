import io

import pytest

from ossim.disk_scheduling import (
    Direction,
    SeekResult,
    cscan,
    cscan_directional,
    fcfs,
    main,
    scan,
    scan_directional,
    sstf,
)


def test_fcfs_keeps_request_order():
    requests = [30, 10, 20]
    result = fcfs(requests, 0)
    assert result.order == requests
    assert result.head == 0


def test_fcfs_monotone_requests_cost_distance_to_last():
    result = fcfs([10, 20, 30], 0)
    assert result.seek == 30


def test_fcfs_empty_requests():
    assert fcfs([], 7) == SeekResult(7, [], 0)


def test_sstf_serves_nearest_first_and_ties_go_to_earlier():
    result = sstf([50, 12, 14], 13)
    assert result.order == [12, 14, 50]


def test_sstf_is_permutation_and_not_worse_than_fcfs_here():
    requests = [98, 183, 37, 122, 14, 124, 65, 67]
    result = sstf(requests, 53)
    assert sorted(result.order) == sorted(requests)
    assert result.seek <= fcfs(requests, 53).seek


def test_scan_without_lower_requests_stops_at_highest():
    requests = [20, 10, 30]
    result = scan(requests, 5, 100)
    assert result.order == [10, 20, 30]
    assert result.seek == max(requests) - 5


def test_scan_reverses_after_upper_requests():
    result = scan([40, 10, 30, 5], 20, 50)
    assert result.order == [30, 40, 10, 5]
    assert result.seek >= scan_directional([40, 10, 30, 5], 20, 50, "right").seek


def test_cscan_matches_directional_right():
    requests = [40, 10, 30, 5]
    result = cscan(requests, 20, 50)
    assert result.order == [30, 40, 5, 10]
    assert result.seek == cscan_directional(requests, 20, 50, Direction.RIGHT).seek


def test_cscan_without_lower_requests_stops_at_highest():
    result = cscan([25, 35], 20, 50)
    assert result.order == [25, 35]
    assert result.seek == 35 - 20


def test_scan_directional_right_always_reaches_last_track():
    tracks, head = 100, 0
    result = scan_directional([10], head, tracks, Direction.RIGHT)
    assert result.order == [10]
    assert result.seek == tracks - 1 - head


def test_scan_directional_left_goes_to_zero_then_up():
    head, requests = 20, [40, 10]
    result = scan_directional(requests, head, 50, Direction.LEFT)
    assert result.order == [10, 40]
    assert result.seek == head + max(requests)


def test_cscan_directional_left_wraps_to_last_track():
    result = cscan_directional([40, 10, 45], 20, 50, "left")
    assert result.order == [10, 45, 40]
    assert result.seek == 78


def test_direction_accepts_strings():
    requests = [40, 10, 30]
    assert scan_directional(requests, 20, 50, "right") == scan_directional(
        requests, 20, 50, Direction.RIGHT
    )


def test_request_at_head_costs_nothing():
    result = scan_directional([20, 20], 20, 50, Direction.LEFT)
    assert result.order == [20, 20]
    assert result.seek == 2 * 20


@pytest.mark.parametrize("algorithm", [scan_directional, cscan_directional])
def test_invalid_direction_rejected(algorithm):
    with pytest.raises(ValueError):
        algorithm([10], 5, 50, "up")


@pytest.mark.parametrize("algorithm", [scan_directional, cscan_directional])
def test_out_of_bounds_rejected(algorithm):
    with pytest.raises(ValueError, match="Head position"):
        algorithm([10], 50, 50, Direction.RIGHT)
    with pytest.raises(ValueError, match="Request out of bounds"):
        algorithm([60], 5, 50, Direction.RIGHT)


def test_path_rendering():
    result = fcfs([4, 9], 1)
    assert result.path() == "1 -> 4 9"


def test_main_fcfs_and_exit(monkeypatch, capsys):
    requests = [98, 183, 37]
    feed = "3\n98 183 37\n53\n200\n1\n9\n7\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(feed))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"FCFS Seek time = {fcfs(requests, 53).seek}" in out
    assert "Enter Valid Choice!!" in out
    assert out.rstrip().endswith("Exit")


def test_main_directional_and_bad_direction(monkeypatch, capsys):
    requests = [98, 183, 37]
    feed = "3\n98 183 37\n53\n200\n5\nup\n6\nleft\n7\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(feed))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Invalid direction for SCAN. Please choose 'left' or 'right'." in out
    expected = cscan_directional(requests, 53, 200, "left").seek
    assert f"Total Seek Time (CSCAN - left): {expected}" in out


def test_main_rejects_bad_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "Invalid input for number of requests" in capsys.readouterr().out