import json

from dna_translator.exporter import write_fasta, write_jsonl, write_text


def test_write_fasta_records(tmp_path):
    path = write_fasta(
        [
            {"header": "demo frame=0 strand=+", "sequence": "MK"},
            {"header": "long", "sequence": "A" * 70},
        ],
        tmp_path / "nested" / "protein.fasta",
    )
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == ">demo frame=0 strand=+"
    assert lines[1] == "MK"
    assert lines[2] == ">long"
    assert "".join(lines[3:]) == "A" * 70


def test_write_fasta_empty(tmp_path):
    path = write_fasta([], tmp_path / "empty.fasta")
    assert path.read_text(encoding="utf-8") == ""


def test_write_jsonl_one_object_per_line(tmp_path):
    rows = [
        {"name": "a", "pdb_id": None, "orf": {"start": 0, "end": 2}},
        {"name": "b", "pdb_id": "1T15", "orf": None},
    ]
    path = write_jsonl(rows, tmp_path / "summary.jsonl")
    parsed = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert parsed == rows


def test_write_text(tmp_path):
    path = write_text("HEADER\nEND\n", tmp_path / "out" / "x.pdb")
    assert path.read_text(encoding="utf-8") == "HEADER\nEND\n"
