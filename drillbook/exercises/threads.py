"""A worker thread completes jobs while the caller polls its progress."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

WAITING = "waiting... "


@dataclass
class JobStatus:
    """Count of completed jobs, guarded by a lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


def _work(status: JobStatus, jobs: int, job_delay: float) -> None:
    for _ in range(jobs):
        time.sleep(job_delay)
        with status.lock:
            status.jobs_completed += 1


def monitor_jobs(
    jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5
) -> list[str]:
    """Run the jobs on a worker thread and return one waiting line per poll."""
    if jobs < 0:
        raise ValueError("jobs must not be negative")
    status = JobStatus()
    worker = threading.Thread(target=_work, args=(status, jobs, job_delay), daemon=True)
    worker.start()
    lines: list[str] = []
    while True:
        with status.lock:
            if status.jobs_completed >= jobs:
                break
        lines.append(WAITING)
        time.sleep(poll_delay)
    worker.join()
    return lines