"""Export helpers for FASTA, CSV, JSONL and PDB outputs."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord


def write_fasta(records: Sequence[dict], path: Path) -> Path:
    """Write ``{"header", "sequence"}`` dicts as FASTA, one record per dict."""
    path.parent.mkdir(parents=True, exist_ok=True)
    seq_records = [
        SeqRecord(Seq(record["sequence"]), id=record["header"], description="")
        for record in records
    ]
    SeqIO.write(seq_records, str(path), "fasta")
    return path


def write_csv(rows: Iterable[dict], path: Path, columns: Sequence[str] | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame(list(rows), columns=columns)
    frame.to_csv(path, index=False)
    return path


def write_jsonl(rows: Iterable[dict], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame(list(rows))
    frame.to_json(path, orient="records", lines=True, force_ascii=False)
    return path


def write_text(text: str, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
