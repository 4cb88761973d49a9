"""Disk head scheduling: FCFS, SCAN and C-SCAN."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Sequence


@dataclass(frozen=True)
class HeadMove:
    """One movement of the disk head and the cylinders it crossed."""

    start: int
    end: int
    distance: int


def fcfs_disk(head: int, requests: Sequence[int]) -> list[HeadMove]:
    """Serve requests in arrival order."""
    return [HeadMove(a, b, abs(b - a)) for a, b in pairwise([head, *requests])]


def _sweep_up(head: int, requests: Sequence[int], size: int):
    if size <= 0:
        raise ValueError("disk size must be positive")
    points = sorted([*requests, head])
    pos = points.index(head)
    edge = size - 1
    moves = [HeadMove(a, b, b - a) for a, b in pairwise(points[pos:])]
    last = points[-1]
    if last != edge:
        moves.append(HeadMove(last, edge, edge - last))
    return moves, points[:pos], edge


def scan(head: int, requests: Sequence[int], size: int) -> list[HeadMove]:
    """Sweep up to the last cylinder, then back down over the rest."""
    moves, lower, edge = _sweep_up(head, requests, size)
    if lower:
        descending = lower[::-1]
        moves.append(HeadMove(edge, descending[0], edge - descending[0]))
        moves.extend(HeadMove(a, b, a - b) for a, b in pairwise(descending))
    return moves


def cscan(head: int, requests: Sequence[int], size: int) -> list[HeadMove]:
    """Sweep up to the last cylinder, jump to cylinder 0, sweep up again."""
    moves, lower, edge = _sweep_up(head, requests, size)
    moves.append(HeadMove(edge, 0, edge))
    moves.extend(HeadMove(a, b, b - a) for a, b in pairwise([0, *lower]))
    return moves


def total_seek_time(moves: Iterable[HeadMove]) -> int:
    """Sum of the distances of all moves."""
    return sum(move.distance for move in moves)


def format_moves(title: str, moves: Sequence[HeadMove]) -> str:
    """Render a schedule's moves and total seek time as text."""
    lines = [f"\t{title} DISK SCHEDULING", ""]
    lines += [f"Head movement from {m.start} to {m.end} : {m.distance}" for m in moves]
    lines += ["", f"Total seek time is : {total_seek_time(moves)}"]
    return "\n".join(lines)


def _prompt_int(message: str) -> int:
    return int(input(message).strip())


_TITLES = {"fcfs": "FCFS", "scan": "SCAN", "cscan": "C-SCAN"}


def main(argv: Sequence[str] | None = None) -> int:
    """Run a disk scheduler from the command line and print the moves."""
    parser = argparse.ArgumentParser(description="Disk scheduling simulator")
    parser.add_argument("algorithm", choices=list(_TITLES))
    parser.add_argument("requests", nargs="*", type=int)
    parser.add_argument("--head", type=int, default=None)
    parser.add_argument("--size", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        head = args.head if args.head is not None else _prompt_int("Enter Head position: ")
        requests = list(args.requests)
        if not requests:
            count = _prompt_int("Enter number of disk requests: ")
            requests = [_prompt_int("Enter a disk request: ") for _ in range(count)]
        if args.algorithm == "fcfs":
            moves = fcfs_disk(head, requests)
        else:
            size = args.size if args.size is not None else _prompt_int("Enter the disk size: ")
            builder = scan if args.algorithm == "scan" else cscan
            moves = builder(head, requests, size)
    except ValueError as exc:
        parser.error(str(exc))

    print("\n" + format_moves(_TITLES[args.algorithm], moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())