"""CPU scheduling: FCFS, priority, round robin and shortest-job-first."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from itertools import accumulate
from typing import Sequence


class Algorithm(Enum):
    """Scheduling algorithms, each with its own report layout."""

    FCFS = "fcfs"
    PRIORITY = "priority"
    ROUND_ROBIN = "rr"
    SJF = "sjf"


@dataclass(frozen=True)
class ProcessStats:
    """Timing figures for one process; pid numbers processes from 1."""

    pid: int
    burst: int
    waiting: int
    turnaround: int
    priority: int | None = None


@dataclass(frozen=True)
class Schedule:
    """The outcome of a scheduling run, processes in display order."""

    algorithm: Algorithm
    processes: tuple[ProcessStats, ...]
    average_waiting: float
    average_turnaround: float

    def format_table(self) -> str:
        """Return the per-process table as text."""
        if self.algorithm is Algorithm.FCFS:
            lines = ["Process\tburst time\twaiting time\tturnaround time\t"]
            lines += [
                f"P{p.pid}\t\t{p.burst}\t\t{p.waiting}\t\t{p.turnaround}\t\t"
                for p in self.processes
            ]
        elif self.algorithm is Algorithm.PRIORITY:
            lines = ["Process\tBurst Time\tPriority\tWaiting Time\tTurnaround Time"]
            lines += [
                f"P{p.pid}\t\t{p.burst}\t\t{p.priority}\t\t{p.waiting}\t\t{p.turnaround}"
                for p in self.processes
            ]
        elif self.algorithm is Algorithm.ROUND_ROBIN:
            lines = ["Process\tBurst Time\tWaiting Time\tTurnaround Time"]
            lines += [
                f"P{p.pid}\t\t{p.burst}\t\t{p.waiting}\t\t{p.turnaround}"
                for p in self.processes
            ]
        else:
            lines = ["P\tBT\tWT\tTT"]
            lines += [
                f"P{p.pid}\t{p.burst}\t{p.waiting}\t{p.turnaround}"
                for p in self.processes
            ]
        return "\n".join(lines)

    def format_gantt(self) -> str:
        """Return a text Gantt chart of the processes in display order."""
        count = len(self.processes)
        times = list(accumulate(p.burst for p in self.processes))
        if self.algorithm is Algorithm.SJF:
            bar = "--------" * count
            labels = "|" + "".join(f" P{p.pid} |" for p in self.processes)
            marks = "0  " + "".join(f"   {t} " for t in times)
        else:
            bar = "-------" * count
            labels = "".join(f"| P{p.pid}  " for p in self.processes) + "|"
            marks = "0" + "".join(f"     {t}" for t in times)
        return "\n".join([bar, labels, bar, marks])


def _check_bursts(burst_times: Sequence[int]) -> list[int]:
    bursts = list(burst_times)
    if not bursts:
        raise ValueError("at least one process is required")
    return bursts


def _truncated_mean(total: int, count: int) -> float:
    """Mean rounded toward zero, as integer division does before widening."""
    quotient = abs(total) // count
    return float(quotient if total >= 0 else -quotient)


def _exchange_sort(items: list, key) -> list:
    """Sort by swapping each slot with any later item of smaller key.

    This ordering is not stable: equal keys may change places.
    """
    result = list(items)
    for i in range(len(result) - 1):
        for j in range(i + 1, len(result)):
            if key(result[i]) > key(result[j]):
                result[i], result[j] = result[j], result[i]
    return result


def _run_in_order(entries: list[tuple[int, int, int | None]]) -> list[ProcessStats]:
    """Run (pid, burst, priority) entries back to back from time zero."""
    stats = []
    clock = 0
    for pid, burst, priority in entries:
        stats.append(ProcessStats(pid, burst, clock, clock + burst, priority))
        clock += burst
    return stats


def fcfs(burst_times: Sequence[int]) -> Schedule:
    """First-come first-served scheduling."""
    bursts = _check_bursts(burst_times)
    stats = _run_in_order([(pid, b, None) for pid, b in enumerate(bursts, 1)])
    count = len(stats)
    return Schedule(
        Algorithm.FCFS,
        tuple(stats),
        _truncated_mean(sum(p.waiting for p in stats), count),
        _truncated_mean(sum(p.turnaround for p in stats), count),
    )


def priority_schedule(burst_times: Sequence[int], priorities: Sequence[int]) -> Schedule:
    """Non-preemptive priority scheduling; lower numbers run first."""
    bursts = _check_bursts(burst_times)
    ranks = list(priorities)
    if len(ranks) != len(bursts):
        raise ValueError("each process needs exactly one priority")
    entries = [(pid, b, r) for pid, (b, r) in enumerate(zip(bursts, ranks), 1)]
    stats = _run_in_order(_exchange_sort(entries, key=lambda e: e[2]))
    count = len(stats)
    return Schedule(
        Algorithm.PRIORITY,
        tuple(stats),
        _truncated_mean(sum(p.waiting for p in stats), count),
        _truncated_mean(sum(p.turnaround for p in stats), count),
    )


def round_robin(burst_times: Sequence[int], quantum: int) -> Schedule:
    """Round-robin scheduling with every process arriving at time zero."""
    bursts = _check_bursts(burst_times)
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    if any(b <= 0 for b in bursts):
        raise ValueError("burst times must be positive")
    remaining = list(bursts)
    finished: dict[int, int] = {}
    clock = 0
    while len(finished) < len(bursts):
        for idx, left in enumerate(remaining):
            if left > 0:
                step = min(left, quantum)
                remaining[idx] = left - step
                clock += step
                if remaining[idx] == 0:
                    finished[idx] = clock
    stats = [
        ProcessStats(idx + 1, burst, finished[idx] - burst, finished[idx])
        for idx, burst in enumerate(bursts)
    ]
    count = len(stats)
    return Schedule(
        Algorithm.ROUND_ROBIN,
        tuple(stats),
        sum(p.waiting for p in stats) / count,
        sum(p.turnaround for p in stats) / count,
    )


def sjf(burst_times: Sequence[int]) -> Schedule:
    """Non-preemptive shortest-job-first scheduling."""
    bursts = _check_bursts(burst_times)
    entries = [(pid, b, None) for pid, b in enumerate(bursts, 1)]
    stats = _run_in_order(_exchange_sort(entries, key=lambda e: e[1]))
    count = len(stats)
    return Schedule(
        Algorithm.SJF,
        tuple(stats),
        sum(p.waiting for p in stats) / count,
        sum(p.turnaround for p in stats) / count,
    )


def _format_report(schedule: Schedule) -> str:
    table = schedule.format_table()
    gantt = schedule.format_gantt()
    wait, tat = schedule.average_waiting, schedule.average_turnaround
    if schedule.algorithm is Algorithm.FCFS:
        return (
            f"{table}\nThe average waiting time is {wait:.2f}\n"
            f"The average turn around time  is {tat:.2f}\n{gantt}"
        )
    if schedule.algorithm is Algorithm.PRIORITY:
        return (
            f"{table}\nThe average waiting time is {wait:.2f}\n"
            f"The average turnaround time is {tat:.2f}\n{gantt}"
        )
    if schedule.algorithm is Algorithm.ROUND_ROBIN:
        return (
            f"\n{table}\n\nThe average waiting time is {wait:.2f}\n"
            f"The average turnaround time is {tat:.2f}\n\nGantt Chart:\n{gantt}"
        )
    return (
        f"Average waiting time = {wait:f}\nAverage turn around time = {tat:f}\n"
        f"\n{table}\n\nGantt Chart:\n{gantt}"
    )


def _prompt_int(message: str) -> int:
    return int(input(message).strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Run a scheduler from the command line and print its report."""
    parser = argparse.ArgumentParser(description="CPU scheduling simulator")
    parser.add_argument("algorithm", choices=[a.value for a in Algorithm])
    parser.add_argument("bursts", nargs="*", type=int, help="burst time of each process")
    parser.add_argument("--priorities", nargs="+", type=int, default=None)
    parser.add_argument("--quantum", type=int, default=None)
    args = parser.parse_args(argv)
    algorithm = Algorithm(args.algorithm)

    try:
        bursts = list(args.bursts)
        priorities = args.priorities
        if not bursts:
            count = _prompt_int("Enter the number of processes: ")
            priorities = [] if algorithm is Algorithm.PRIORITY else priorities
            for pid in range(1, count + 1):
                bursts.append(_prompt_int(f"Enter the burst time for P{pid}: "))
                if algorithm is Algorithm.PRIORITY:
                    priorities.append(_prompt_int(f"Enter the priority for P{pid}: "))
        quantum = args.quantum
        if algorithm is Algorithm.ROUND_ROBIN and quantum is None:
            quantum = _prompt_int("Enter the time quantum: ")

        if algorithm is Algorithm.FCFS:
            schedule = fcfs(bursts)
        elif algorithm is Algorithm.PRIORITY:
            if priorities is None:
                parser.error("--priorities is required for priority scheduling")
            schedule = priority_schedule(bursts, priorities)
        elif algorithm is Algorithm.ROUND_ROBIN:
            schedule = round_robin(bursts, quantum)
        else:
            schedule = sjf(bursts)
    except ValueError as exc:
        parser.error(str(exc))

    print(_format_report(schedule))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())