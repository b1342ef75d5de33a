"""Heuristic sequence-type detection and header identifier extraction.

Both helpers are best-effort guesses. A wrong answer only produces a
warning or a missing identifier; neither is used to reject input.
"""

from __future__ import annotations

import re
from enum import Enum

NUCLEOTIDE_RATIO = 0.90

_WHITESPACE = re.compile(r"\s+")
_HEADER_PATTERNS = (
    re.compile(r"pdb\|([0-9][A-Za-z0-9]{3})\|", re.IGNORECASE),
    re.compile(r"pdb[:\s]+([0-9][A-Za-z0-9]{3})", re.IGNORECASE),
)


class SequenceType(Enum):
    NUCLEOTIDE = "nucleotide"
    AMINO_ACID = "amino_acid"
    INDETERMINATE = "indeterminate"


def classify_sequence_type(text: str | None) -> SequenceType:
    """Guess whether ``text`` is nucleotide or amino-acid sequence."""
    compact = _WHITESPACE.sub("", text or "").upper()
    if not compact:
        return SequenceType.INDETERMINATE
    bases = sum(1 for ch in compact if ch in "ATGC")
    if bases / len(compact) >= NUCLEOTIDE_RATIO:
        return SequenceType.NUCLEOTIDE
    return SequenceType.AMINO_ACID


def extract_header_identifier(text: str | None) -> str | None:
    """Return a PDB id from an explicit ``pdb`` tag on the first FASTA line."""
    first_line = (text or "").split("\n")[0].strip()
    if not first_line.startswith(">"):
        return None
    for pattern in _HEADER_PATTERNS:
        match = pattern.search(first_line)
        if match:
            return match.group(1).upper()
    return None
