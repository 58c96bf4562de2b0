"""The job list of a job-control shell."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, TextIO

MAXJOBS = 16


class JobState(IntEnum):
    """Job states: foreground, background or stopped."""

    UNDEF = 0
    FG = 1
    BG = 2
    ST = 3


@dataclass
class Job:
    """One job: its process ID, job ID, state and the command line that started it."""

    pid: int
    jid: int
    state: JobState
    cmdline: str


_STATE_LABELS = {
    JobState.BG: "Running ",
    JobState.FG: "Foreground ",
    JobState.ST: "Stopped ",
}


class JobList:
    """A fixed number of job slots with job IDs handed out in turn."""

    def __init__(
        self,
        max_jobs: int = MAXJOBS,
        verbose: bool = False,
        out: TextIO | None = None,
    ) -> None:
        if max_jobs < 1:
            raise ValueError("a job list needs at least one slot")
        self.max_jobs = max_jobs
        self.verbose = verbose
        self.out = out
        self.next_jid = 1
        self._slots: list[Job | None] = [None] * max_jobs

    @property
    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def add(self, pid: int, state: JobState | int, cmdline: str) -> bool:
        """Put a job in the first free slot; return False if pid is invalid or the list is full."""
        if pid < 1:
            return False
        for index, slot in enumerate(self._slots):
            if slot is None:
                job = Job(pid=pid, jid=self.next_jid, state=JobState(state), cmdline=cmdline)
                self._slots[index] = job
                self.next_jid += 1
                if self.next_jid > self.max_jobs:
                    self.next_jid = 1
                if self.verbose:
                    self._stream.write(f"Added job [{job.jid}] {job.pid} {job.cmdline}\n")
                return True
        self._stream.write("Tried to create too many jobs\n")
        return False

    def delete(self, pid: int) -> bool:
        """Remove the job with process ID ``pid``; return whether one was removed."""
        if pid < 1:
            return False
        for index, slot in enumerate(self._slots):
            if slot is not None and slot.pid == pid:
                self._slots[index] = None
                self.next_jid = self.max_jid() + 1
                return True
        return False

    def fg_pid(self) -> int:
        """Return the process ID of the foreground job, or 0 if there is none."""
        return next((job.pid for job in self if job.state is JobState.FG), 0)

    def get_by_pid(self, pid: int) -> Job | None:
        """Find a job by process ID."""
        if pid < 1:
            return None
        return next((job for job in self if job.pid == pid), None)

    def get_by_jid(self, jid: int) -> Job | None:
        """Find a job by job ID."""
        if jid < 1:
            return None
        return next((job for job in self if job.jid == jid), None)

    def pid_to_jid(self, pid: int) -> int:
        """Map a process ID to its job ID; 0 when no job has it."""
        job = self.get_by_pid(pid)
        return job.jid if job is not None else 0

    def max_jid(self) -> int:
        """Return the largest job ID in use, or 0."""
        return max((job.jid for job in self), default=0)

    def format_jobs(self) -> str:
        """Return the job listing, one job per slot in slot order."""
        lines = []
        for index, job in enumerate(self._slots):
            if job is None:
                continue
            label = _STATE_LABELS.get(
                job.state,
                f"listjobs: Internal error: job[{index}].state={int(job.state)} ",
            )
            lines.append(f"[{job.jid}] ({job.pid}) {label}{job.cmdline}")
        return "".join(lines)

    def __iter__(self) -> Iterator[Job]:
        return (job for job in self._slots if job is not None)