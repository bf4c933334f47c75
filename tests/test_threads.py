import pytest

from drillbook.exercises.threads import WAITING, JobStatus, monitor_jobs


def test_no_jobs_means_no_waiting():
    assert monitor_jobs(0, 0.0, 0.0) == []


def test_every_line_is_a_waiting_line():
    lines = monitor_jobs(3, 0.0, 0.001)
    assert all(line == WAITING for line in lines)


def test_slow_jobs_are_waited_for():
    lines = monitor_jobs(2, 0.02, 0.001)
    assert len(lines) >= 1


def test_waiting_line_text():
    lines = monitor_jobs(1, 0.05, 0.001)
    assert lines[0] == "waiting... "


def test_negative_jobs_rejected():
    with pytest.raises(ValueError):
        monitor_jobs(-1, 0.0, 0.0)


def test_job_status_starts_at_zero():
    assert JobStatus().jobs_completed == 0