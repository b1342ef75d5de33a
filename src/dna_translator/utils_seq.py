"""Lightweight sequence utilities: strands, codons and FASTA handling."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Tuple

from Bio import SeqIO

from .featurizer import sanitize

# Bases without a Watson-Crick partner are dropped.
COMPLEMENT = {"A": "T", "T": "A", "G": "C", "C": "G"}

FRAMES = (0, 1, 2)


class Strand(Enum):
    FORWARD = "+"
    REVERSE = "-"

    @classmethod
    def parse(cls, value: "Strand | str") -> "Strand":
        if isinstance(value, cls):
            return value
        lowered = str(value).strip().lower()
        if lowered in ("+", "forward", "fwd"):
            return cls.FORWARD
        if lowered in ("-", "reverse", "rev"):
            return cls.REVERSE
        raise ValueError(f"Unknown strand: {value!r}")


def check_frame(frame: int) -> int:
    if frame not in FRAMES:
        raise ValueError(f"Reading frame must be 0, 1 or 2, got {frame!r}")
    return frame


def reverse_complement(sequence: str) -> str:
    """Return the reverse complement of a nucleotide sequence."""
    return "".join(COMPLEMENT.get(base, "") for base in reversed(sequence))


def to_codons(sequence: str) -> List[str]:
    """Split a sequence into triplets from position 0, dropping a partial tail."""
    return [sequence[idx : idx + 3] for idx in range(0, len(sequence) - 2, 3)]


def oriented(sequence: str, frame: int = 0, strand: Strand | str = Strand.FORWARD) -> str:
    """Sanitize, apply the strand and drop ``frame`` leading bases."""
    check_frame(frame)
    seq = sanitize(sequence)
    if Strand.parse(strand) is Strand.REVERSE:
        seq = reverse_complement(seq)
    return seq[frame:]


def tokenize(
    sequence: str, frame: int = 0, strand: Strand | str = Strand.FORWARD
) -> List[str]:
    """Return the frame-aligned codons of ``sequence`` on the given strand."""
    return to_codons(oriented(sequence, frame, strand))


def extract_fasta_body(text: str) -> str:
    """Drop ``>`` header lines and join the rest. The result is not sanitized."""
    lines = (text or "").split("\n")
    return "".join(line for line in lines if not line.startswith(">")).strip()


def load_fasta_records(path: Path) -> List[Tuple[str, str]]:
    """Read every record of a FASTA file as (description, uppercase sequence)."""
    if not path.exists():
        raise FileNotFoundError(f"FASTA file not found: {path}")
    return [
        (record.description, str(record.seq).upper())
        for record in SeqIO.parse(str(path), "fasta")
    ]
