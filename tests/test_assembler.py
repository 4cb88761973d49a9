import pytest

from syslab.assembler import (
    AssemblerError,
    PassOneResult,
    PassTwoResult,
    Statement,
    main,
    pass_one,
    pass_two,
    read_optab,
    read_statements,
)

SAMPLE_SOURCE = """COPY START 1000
** LDA ALPHA
** ADD BETA
** STA GAMMA
ALPHA WORD 5
BETA RESW 2
GAMMA RESB 4
EOFS BYTE C'EOF'
** END **
"""

OPTAB_TEXT = "LDA 00\nADD 18\nSTA 0C\n"


def _assemble(source: str) -> tuple[PassOneResult, PassTwoResult]:
    optab = read_optab(OPTAB_TEXT)
    first = pass_one(read_statements(source), optab)
    second = pass_two(first.intermediate, optab, first.symtab, first.program_length)
    return first, second


def _length_of(body: str) -> int:
    source = f"P START 0\n{body}** END **\n"
    return pass_one(read_statements(source), read_optab(OPTAB_TEXT)).program_length


def _listing_codes(listing: str) -> list[str]:
    return [line.rsplit(" ", 1)[1] for line in listing.splitlines()[1:]]


def test_read_statements_groups_triples():
    statements = read_statements(SAMPLE_SOURCE)
    assert statements[0] == Statement("COPY", "START", "1000")
    assert statements[-1] == Statement("**", "END", "**")
    assert len(statements) == len(SAMPLE_SOURCE.splitlines())


def test_read_statements_rejects_incomplete_statement():
    with pytest.raises(AssemblerError):
        read_statements("COPY START")


def test_read_optab_pairs_and_first_entry_wins():
    assert read_optab(OPTAB_TEXT) == {"LDA": "00", "ADD": "18", "STA": "0C"}
    assert read_optab("LDA 00 LDA 99")["LDA"] == "00"


def test_read_optab_rejects_dangling_mnemonic():
    with pytest.raises(AssemblerError):
        read_optab("LDA 00 ADD")


def test_pass_one_start_address_and_header_line():
    first, _ = _assemble(SAMPLE_SOURCE)
    assert first.start_address == 1000
    assert first.intermediate.startswith("\tCOPY\tSTART\t1000\n")


def test_pass_one_symbols_in_order_with_increasing_addresses():
    first, _ = _assemble(SAMPLE_SOURCE)
    assert list(first.symtab) == ["ALPHA", "BETA", "GAMMA", "EOFS"]
    addresses = list(first.symtab.values())
    assert addresses == sorted(addresses)
    assert addresses[0] > first.start_address


def test_pass_one_program_length_matches_end_address():
    first, _ = _assemble(SAMPLE_SOURCE)
    last = first.intermediate.splitlines()[-1]
    assert last.endswith("\tEND\t**\t")
    assert int(last.split("\t")[0]) - first.start_address == first.program_length


def test_word_and_instruction_take_same_space():
    assert _length_of("X WORD 7\n") == _length_of("** LDA X\nX RESB 0\n")


@pytest.mark.parametrize("count", [0, 1, 7, 250])
def test_resb_reserves_count_bytes(count):
    assert _length_of(f"BUF RESB {count}\n") == count


@pytest.mark.parametrize("count", [1, 4, 10])
def test_resw_reserves_three_times_resb(count):
    assert _length_of(f"BUF RESW {count}\n") == 3 * _length_of(f"BUF RESB {count}\n")


def test_byte_string_size_follows_its_characters():
    assert _length_of("S BYTE C'EOF'\n") == _length_of("S RESB 3\n")


def test_pass_one_without_start_begins_at_zero():
    source = "FIRST LDA FIRST\n** END **\n"
    first = pass_one(read_statements(source), read_optab(OPTAB_TEXT))
    assert first.start_address == 0
    assert first.symtab["FIRST"] == 0
    assert not first.intermediate.startswith("\t")


def test_pass_one_rejects_duplicate_label():
    source = "P START 0\nA WORD 1\nA WORD 2\n** END **\n"
    with pytest.raises(AssemblerError, match="A"):
        pass_one(read_statements(source), read_optab(OPTAB_TEXT))


def test_pass_one_rejects_unknown_opcode():
    source = "P START 0\n** JUMP A\n** END **\n"
    with pytest.raises(AssemblerError, match="JUMP"):
        pass_one(read_statements(source), read_optab(OPTAB_TEXT))


def test_pass_one_requires_end():
    with pytest.raises(AssemblerError):
        pass_one(read_statements("P START 0\nA WORD 1\n"), read_optab(OPTAB_TEXT))


def test_pass_one_requires_statements():
    with pytest.raises(AssemblerError):
        pass_one([], read_optab(OPTAB_TEXT))


def test_symtab_text_lists_every_symbol():
    first, _ = _assemble(SAMPLE_SOURCE)
    rows = [line.split("\t") for line in first.symtab_text.splitlines()]
    assert rows == [[label, str(address)] for label, address in first.symtab.items()]


def test_pass_two_header_and_end_records():
    first, second = _assemble(SAMPLE_SOURCE)
    header = second.records[0]
    assert header.startswith("H^COPY^001000^")
    assert int(header.split("^")[3]) == first.program_length
    assert second.records[-1] == f"E^{first.start_address:06d}"


def test_pass_two_object_codes():
    first, second = _assemble(SAMPLE_SOURCE)
    codes = _listing_codes(second.listing)
    assert codes[0] == "00" + f"{first.symtab['ALPHA']:04d}"
    assert codes[3] == "000005"
    assert codes[4] == "" and codes[5] == ""
    assert codes[6] == "454F46"


def test_pass_two_character_byte_constant():
    _, second = _assemble("P START 0\nS BYTE C'AB'\n** END **\n")
    assert _listing_codes(second.listing) == ["4142"]


def test_pass_two_unknown_symbol_keeps_only_opcode():
    _, second = _assemble("P START 0\n** LDA NOWHERE\n** END **\n")
    assert _listing_codes(second.listing) == ["00"]


def test_pass_two_listing_omits_end_statement():
    statements = read_statements(SAMPLE_SOURCE)
    _, second = _assemble(SAMPLE_SOURCE)
    assert len(second.listing.splitlines()) == len(statements) - 1


def test_text_records_split_and_lengths_agree():
    source = "P START 0\n" + "** LDA X\n" * 30 + "X WORD 1\n** END **\n"
    _, second = _assemble(source)
    texts = [r for r in second.records if r.startswith("T^")]
    assert len(texts) > 1
    for record in texts:
        fields = record.split("^")
        body = [f for f in fields[3:] if f]
        assert int(fields[2], 16) * 2 == sum(len(f) for f in body)
    assert all(r.endswith("^") for r in texts[:-1])
    assert not texts[-1].endswith("^")
    joined = [f for r in texts for f in r.split("^")[3:] if f]
    assert joined == [c for c in _listing_codes(second.listing) if c]


def test_reserved_space_does_not_break_text_record():
    _, second = _assemble("P START 0\n** LDA X\nX RESB 9\n** STA X\n** END **\n")
    assert len([r for r in second.records if r.startswith("T^")]) == 1


def test_pass_two_rejects_malformed_intermediate():
    with pytest.raises(AssemblerError):
        pass_two("\tP\tSTART\t0\n12\tA\n", {}, {}, 0)


def test_pass_two_rejects_missing_end():
    with pytest.raises(AssemblerError):
        pass_two("\tP\tSTART\t0\n0\tA\tWORD\t1\n", {}, {}, 3)


def test_main_runs_both_passes(tmp_path, capsys):
    (tmp_path / "source.txt").write_text(SAMPLE_SOURCE)
    (tmp_path / "optab.txt").write_text(OPTAB_TEXT)
    assert main(["all", "--directory", str(tmp_path)]) == 0
    first, second = _assemble(SAMPLE_SOURCE)
    assert (tmp_path / "objectcode.txt").read_text() == second.object_program
    assert (tmp_path / "output.txt").read_text() == second.listing
    assert (tmp_path / "length.txt").read_text() == str(first.program_length)
    out = capsys.readouterr().out
    assert f"Program length:{first.program_length}" in out
    assert "FINISHED EXECUTION!!" in out


def test_main_separate_passes_match_combined(tmp_path):
    (tmp_path / "source.txt").write_text(SAMPLE_SOURCE)
    (tmp_path / "optab.txt").write_text(OPTAB_TEXT)
    assert main(["pass1", "-d", str(tmp_path)]) == 0
    assert not (tmp_path / "objectcode.txt").exists()
    assert main(["pass2", "-d", str(tmp_path)]) == 0
    _, second = _assemble(SAMPLE_SOURCE)
    assert (tmp_path / "objectcode.txt").read_text() == second.object_program


def test_main_reports_missing_files(tmp_path, capsys):
    assert main(["all", "-d", str(tmp_path)]) == 1
    assert "Error" in capsys.readouterr().err