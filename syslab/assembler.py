"""Two-pass assembler for a simple SIC-style machine."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Container, Iterable, Mapping, Sequence

NO_LABEL = "**"
MAX_TEXT_LENGTH = 60

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class AssemblerError(ValueError):
    """Raised when source or intermediate text cannot be assembled."""


@dataclass(frozen=True)
class Statement:
    """One source line: label (or ``**``), operation code and operand."""

    label: str
    opcode: str
    operand: str


@dataclass(frozen=True)
class PassOneResult:
    """Addresses assigned by the first pass."""

    start_address: int
    program_length: int
    symtab: dict[str, int]
    intermediate: str

    @property
    def symtab_text(self) -> str:
        """The symbol table as ``label<TAB>address`` lines."""
        return "".join(f"{label}\t{address}\n" for label, address in self.symtab.items())


@dataclass(frozen=True)
class PassTwoResult:
    """The assembly listing and the object program of the second pass."""

    listing: str
    object_program: str

    @property
    def records(self) -> list[str]:
        """Header, text and end records of the object program."""
        return self.object_program.splitlines()


def _atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when it does not start with one."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_statements(text: str) -> list[Statement]:
    """Split source text into statements of three whitespace-separated fields."""
    tokens = text.split()
    if len(tokens) % 3:
        raise AssemblerError("source ends with an incomplete statement")
    fields = iter(tokens)
    return [Statement(label, opcode, operand) for label, opcode, operand in zip(fields, fields, fields)]


def _read_pairs(text: str, what: str) -> dict[str, str]:
    tokens = text.split()
    if len(tokens) % 2:
        raise AssemblerError(f"{what} ends with an entry that has no value")
    table: dict[str, str] = {}
    fields = iter(tokens)
    for key, value in zip(fields, fields):
        table.setdefault(key, value)
    return table


def read_optab(text: str) -> dict[str, str]:
    """Parse ``mnemonic code`` pairs; the first entry for a mnemonic wins."""
    return _read_pairs(text, "operation code table")


def _read_symtab(text: str) -> dict[str, int]:
    return {label: _atoi(value) for label, value in _read_pairs(text, "symbol table").items()}


def _statement_size(statement: Statement, optab: Container[str]) -> int:
    opcode, operand = statement.opcode, statement.operand
    if opcode in optab or opcode == "WORD":
        return 3
    if opcode == "RESW":
        return 3 * _atoi(operand)
    if opcode == "RESB":
        return _atoi(operand)
    if opcode == "BYTE":
        return len(operand) - 3
    raise AssemblerError(f"invalid operation code {opcode!r}")


def pass_one(statements: Iterable[Statement], optab: Container[str]) -> PassOneResult:
    """Assign addresses, build the symbol table and the intermediate text."""
    items = list(statements)
    if not items:
        raise AssemblerError("no statements to assemble")

    lines: list[str] = []
    first = items[0]
    if first.opcode == "START":
        start = _atoi(first.operand)
        lines.append(f"\t{first.label}\t{first.opcode}\t{first.operand}\n")
        body = items[1:]
    else:
        start = 0
        body = items

    locctr = start
    symtab: dict[str, int] = {}
    for statement in body:
        if statement.opcode == "END":
            lines.append(f"{locctr}\t{statement.label}\t{statement.opcode}\t{statement.operand}\t")
            break
        if statement.label != NO_LABEL:
            if statement.label in symtab:
                raise AssemblerError(f"label {statement.label!r} is already in the symbol table")
            symtab[statement.label] = locctr
        size = _statement_size(statement, optab)
        lines.append(f"{locctr}\t{statement.label}\t{statement.opcode}\t{statement.operand}\n")
        locctr += size
    else:
        raise AssemblerError("missing END statement")

    return PassOneResult(start, locctr - start, symtab, "".join(lines))


def _parse_intermediate(text: str) -> tuple[Statement | None, list[tuple[int, Statement]]]:
    header: Statement | None = None
    entries: list[tuple[int, Statement]] = []
    for number, line in enumerate(text.splitlines(), 1):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) == 3 and header is None and not entries:
            header = Statement(*tokens)
        elif len(tokens) == 4:
            try:
                address = int(tokens[0])
            except ValueError:
                raise AssemblerError(f"bad address on intermediate line {number}: {line!r}") from None
            entries.append((address, Statement(*tokens[1:])))
        else:
            raise AssemblerError(f"malformed intermediate line {number}: {line!r}")
    return header, entries


def _object_code(statement: Statement, optab: Mapping[str, str], symtab: Mapping[str, int]) -> str:
    opcode, operand = statement.opcode, statement.operand
    if opcode == "BYTE":
        if not operand.startswith("C'"):
            return ""
        if operand == "C'EOF'":
            return "454F46"
        return "".join(f"{ord(ch):02X}" for ch in operand[2:-1])
    if opcode == "WORD":
        return f"{_atoi(operand):06d}"
    if opcode in ("RESB", "RESW"):
        return ""
    code = optab.get(opcode, "")
    if operand in symtab:
        code += f"{symtab[operand]:04d}"
    return code


def _text_record(start: int, length: int, body: str) -> str:
    return f"T^{start:06d}^{length // 2:02X}^{body}"


def pass_two(
    intermediate: str,
    optab: Mapping[str, str],
    symtab: Mapping[str, int],
    program_length: int,
) -> PassTwoResult:
    """Generate the listing and object program from intermediate text."""
    header, entries = _parse_intermediate(intermediate)
    listing: list[str] = []
    records: list[str] = []
    start = 0
    if header is not None:
        listing.append(f"    {header.label:<7}{header.opcode:<7}{header.operand:<7}")
        if header.opcode == "START":
            start = _atoi(header.operand)
            records.append(f"H^{header.label}^{start:06d}^{program_length:06d}")

    text_start = entries[0][0] if entries else start
    chunks: list[str] = []
    length = 0
    for address, statement in entries:
        if statement.opcode == "END":
            break
        code = _object_code(statement, optab, symtab)
        listing.append(
            f"{address}{statement.label:<7}{statement.opcode:<7}{statement.operand:<7} {code}"
        )
        if length + len(code) > MAX_TEXT_LENGTH:
            records.append(_text_record(text_start, length, "".join(f"{c}^" for c in chunks)))
            chunks = []
            text_start = address
            length = 0
        if code:
            chunks.append(code)
            length += len(code)
    else:
        raise AssemblerError("intermediate text has no END statement")

    if length > 0:
        records.append(_text_record(text_start, length, "^".join(chunks)))
    records.append(f"E^{start:06d}")

    return PassTwoResult("".join(f"{line}\n" for line in listing), "".join(f"{r}\n" for r in records))


def main(argv: Sequence[str] | None = None) -> int:
    """Run one or both passes over the files in a working directory."""
    parser = argparse.ArgumentParser(description="Two-pass assembler")
    parser.add_argument("step", nargs="?", choices=["pass1", "pass2", "all"], default="all")
    parser.add_argument("-d", "--directory", type=Path, default=Path("."))
    args = parser.parse_args(argv)
    directory: Path = args.directory

    try:
        optab = read_optab((directory / "optab.txt").read_text())
        if args.step in ("pass1", "all"):
            first = pass_one(read_statements((directory / "source.txt").read_text()), optab)
            (directory / "intermediate.txt").write_text(first.intermediate)
            (directory / "symtab.txt").write_text(first.symtab_text)
            (directory / "length.txt").write_text(str(first.program_length))
            print(f"\nProgram length:{first.program_length}\n")
        if args.step in ("pass2", "all"):
            second = pass_two(
                (directory / "intermediate.txt").read_text(),
                optab,
                _read_symtab((directory / "symtab.txt").read_text()),
                _atoi((directory / "length.txt").read_text()),
            )
            (directory / "objectcode.txt").write_text(second.object_program)
            (directory / "output.txt").write_text(second.listing)
            print("FINISHED EXECUTION!!")
    except (OSError, AssemblerError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())