"""CPU scheduling simulations: FCFS, SJF, priority and round robin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

_BORDER = "+----------+-------------+-----------+-------------+----------------+"
_HEADER = "| Process  | Arrival Time| Burst Time| Waiting Time| Turnaround Time|"
_PRIORITY_BORDER = (
    "+----------+-------------+-----------+----------+-------------+----------------+"
)
_PRIORITY_HEADER = (
    "| Process  | Arrival Time| Burst Time| Priority | Waiting Time| Turnaround Time|"
)


@dataclass(frozen=True)
class Process:
    """A process to be scheduled. Lower priority values mean higher priority."""

    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0


@dataclass(frozen=True)
class ProcessResult:
    """The outcome of scheduling one process."""

    process: Process
    completion_time: int
    start_time: int | None = None

    @property
    def pid(self) -> int:
        return self.process.pid

    @property
    def arrival_time(self) -> int:
        return self.process.arrival_time

    @property
    def burst_time(self) -> int:
        return self.process.burst_time

    @property
    def priority(self) -> int:
        return self.process.priority

    @property
    def turnaround_time(self) -> int:
        return self.completion_time - self.arrival_time

    @property
    def waiting_time(self) -> int:
        return self.turnaround_time - self.burst_time


def _run_non_preemptive(
    processes: Iterable[Process], key: Callable[[Process], int]
) -> list[ProcessResult]:
    """Run processes to completion one at a time, picking the ready one with the lowest key.

    Ties go to the process listed first. Results come back in input order.
    """
    procs = list(processes)
    pending = list(enumerate(procs))
    results: dict[int, ProcessResult] = {}
    clock = 0
    while pending:
        ready = [item for item in pending if item[1].arrival_time <= clock]
        if not ready:
            clock = min(p.arrival_time for _, p in pending)
            continue
        index, chosen = min(ready, key=lambda item: key(item[1]))
        pending.remove((index, chosen))
        completion = clock + chosen.burst_time
        results[index] = ProcessResult(chosen, completion_time=completion, start_time=clock)
        clock = completion
    return [results[index] for index in range(len(procs))]


def fcfs(processes: Iterable[Process]) -> list[ProcessResult]:
    """First come, first served scheduling."""
    return _run_non_preemptive(processes, key=lambda p: p.arrival_time)


def sjf(processes: Iterable[Process]) -> list[ProcessResult]:
    """Non-preemptive shortest job first scheduling."""
    return _run_non_preemptive(processes, key=lambda p: p.burst_time)


def priority_scheduling(processes: Iterable[Process]) -> list[ProcessResult]:
    """Non-preemptive priority scheduling; the lowest priority value runs first."""
    return _run_non_preemptive(processes, key=lambda p: p.priority)


def round_robin(processes: Iterable[Process], time_quantum: int) -> list[ProcessResult]:
    """Round robin scheduling, visiting ready processes in input order on each pass."""
    if time_quantum <= 0:
        raise ValueError("time quantum must be positive")
    procs = list(processes)
    if any(p.burst_time < 0 for p in procs):
        raise ValueError("burst time must not be negative")

    remaining = [p.burst_time for p in procs]
    completion: list[int | None] = [None] * len(procs)
    clock = 0
    while any(done is None for done in completion):
        found = False
        for index, proc in enumerate(procs):
            if completion[index] is None and proc.arrival_time <= clock:
                run = min(remaining[index], time_quantum)
                clock += run
                remaining[index] -= run
                if remaining[index] == 0:
                    completion[index] = clock
                found = True
        if not found:
            clock = min(
                p.arrival_time for p, done in zip(procs, completion) if done is None
            )
    return [
        ProcessResult(proc, completion_time=done)
        for proc, done in zip(procs, completion)
    ]


def _average(values: Sequence[int]) -> float:
    if not values:
        raise ValueError("no results to average")
    return sum(values) / len(values)


def average_waiting_time(results: Sequence[ProcessResult]) -> float:
    """Mean waiting time over all results."""
    return _average([r.waiting_time for r in results])


def average_turnaround_time(results: Sequence[ProcessResult]) -> float:
    """Mean turnaround time over all results."""
    return _average([r.turnaround_time for r in results])


def format_table(results: Sequence[ProcessResult], show_priority: bool = False) -> str:
    """Render results as a boxed table followed by the average times."""
    border = _PRIORITY_BORDER if show_priority else _BORDER
    lines = [border, _PRIORITY_HEADER if show_priority else _HEADER, border]
    for r in results:
        cells = [f"P{r.pid:<7}", f"{r.arrival_time:<11}", f"{r.burst_time:<9}"]
        if show_priority:
            cells.append(f"{r.priority:<8}")
        cells += [f"{r.waiting_time:<11}", f"{r.turnaround_time:<14}"]
        lines.append("| " + " | ".join(cells) + " |")
    lines.append(border)
    lines.append(f"Average waiting time = {average_waiting_time(results):.2f}")
    lines.append(f"Average turnaround time = {average_turnaround_time(results):.2f}")
    return "\n".join(lines) + "\n"


def format_round_robin(results: Sequence[ProcessResult]) -> str:
    """Render round robin results as tab-separated columns."""
    lines = ["Process\tArrival\tBurst\tWaiting\tTurnaround"]
    lines.extend(
        f"P{r.pid}\t{r.arrival_time}\t{r.burst_time}\t{r.waiting_time}\t{r.turnaround_time}"
        for r in results
    )
    return "\n".join(lines) + "\n"