# syslab

Small simulators for classic systems-programming exercises:

- **CPU scheduling** (`syslab.cpu_scheduling`): first-come first-served,
  shortest job first, non-preemptive priority and round robin. Each run
  returns a `Schedule` that holds one `ProcessStats` per process, with
  waiting and turnaround times. A `Schedule` can render a table and a
  Gantt chart.
- **Disk scheduling** (`syslab.disk_scheduling`): FCFS, SCAN and C-SCAN
  head movement as a list of `HeadMove` records, plus the total seek time.
- **Two-pass SIC assembler** (`syslab.assembler`): pass one assigns
  addresses and builds the symbol table, the intermediate text and the
  program length. Pass two produces the listing and the H/T/E object
  records.

## Installation

```
pip install .
```

## CPU scheduling

```python
from syslab.cpu_scheduling import fcfs, sjf, priority_schedule, round_robin

schedule = sjf([6, 8, 7, 3])
print(schedule.format_table())
print(schedule.format_gantt())
print(schedule.average_waiting, schedule.average_turnaround)

by_priority = priority_schedule([10, 1, 2], [3, 1, 2])  # lower number runs first
rr = round_robin([24, 3, 3], quantum=4)
```

All processes are taken to arrive at time zero.

- `fcfs` and `priority_schedule` truncate their averages to a whole number.
  `sjf` and `round_robin` report the exact mean.
- `sjf` and `priority_schedule` reorder processes with an exchange sort
  that is not stable, so processes with equal keys may swap places.
- `round_robin` needs a positive quantum and positive burst times. It
  lists processes in their original order.
- An empty list of burst times raises `ValueError`.

## Disk scheduling

```python
from syslab.disk_scheduling import fcfs_disk, scan, cscan, total_seek_time, format_moves

moves = scan(53, [98, 183, 37, 122, 14, 124, 65, 67], size=200)
print(total_seek_time(moves))
print(format_moves("SCAN", moves))  # heading reads "SCAN DISK SCHEDULING"
```

- `scan` sweeps up to cylinder `size - 1`, then back down over the lower
  requests.
- `cscan` sweeps up to `size - 1`, jumps to cylinder 0 (the jump counts
  as `size - 1`), then sweeps up over the lower requests.
- A non-positive `size` raises `ValueError`.

## Assembler

```python
from syslab.assembler import read_statements, read_optab, pass_one, pass_two

with open("source.txt") as src, open("optab.txt") as ops:
    statements = read_statements(src.read())
    optab = read_optab(ops.read())

first = pass_one(statements, optab)
second = pass_two(first.intermediate, optab, first.symtab, first.program_length)
print(second.listing)
print("\n".join(second.records))
```

An optab file lists one mnemonic and its opcode per line, for example
`LDA 00`. A source line has three fields, `label opcode operand`. Use `**`
where there is no label. A missing `END` statement raises
`AssemblerError`, a subclass of `ValueError`. So do a label defined
twice and an unknown operation code.

## Commands

- `syslab-cpu {fcfs,priority,rr,sjf} [BURST ...] [--priorities P ...] [--quantum Q]`
  prints the table, the averages and the Gantt chart. If no burst times
  are given it asks for them, and for priorities with `priority`. With
  `rr` it asks for the quantum if `--quantum` is missing.
- `syslab-disk {fcfs,scan,cscan} [REQUEST ...] [--head H] [--size S]`
  prints every head movement and the total seek time. It asks for any
  value that is not given.
- `syslab-asm [pass1|pass2|all] [-d DIRECTORY]` reads `optab.txt` and
  `source.txt` from the directory (default: the current one). Pass one
  writes `intermediate.txt`, `symtab.txt` and `length.txt`. Pass two
  reads those back and writes `output.txt` and `objectcode.txt`. The
  default is `all`.

Run any of them with `--help` to see its options.

## Tests

```
pip install .[test]
pytest
```