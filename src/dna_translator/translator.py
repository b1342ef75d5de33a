"""Codon-to-protein translation and ORF bounds.

Two translation entry points exist on purpose:

* :func:`translate` finds the first ``ATG`` by character position anywhere in
  the forward sequence and reads triplets from that position, whatever its
  phase.
* :func:`translate_framed` applies the strand and frame first, then looks
  for the first ``ATG`` codon among the frame-aligned codons.

For sequences with several ``ATG`` occurrences in different phases the two
can pick different start codons.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .featurizer import sanitize
from .genetic_code import START_CODON, STOP_SYMBOL, three_letter, translate_codon
from .utils_seq import Strand, to_codons, tokenize


@dataclass(frozen=True, slots=True)
class Translation:
    one_letter: str = ""
    three_letter: str = ""

    def __bool__(self) -> bool:
        return bool(self.one_letter)

    def __len__(self) -> int:
        return len(self.one_letter)

    def as_dict(self) -> dict:
        return {"one_letter": self.one_letter, "three_letter": self.three_letter}


@dataclass(frozen=True, slots=True)
class OrfSpan:
    """Codon indices of an ORF; ``end`` is exclusive."""

    start: int
    end: int
    has_stop: bool

    def __len__(self) -> int:
        return self.end - self.start


EMPTY = Translation()


def _translate_codons(codons: Iterable[str]) -> Translation:
    residues: List[str] = []
    for codon in codons:
        symbol = translate_codon(codon)
        if symbol == STOP_SYMBOL:
            break
        residues.append(symbol)
    one = "".join(residues)
    return Translation(one, "-".join(three_letter(symbol) for symbol in one))


def translate(sequence: str) -> Translation:
    """Translate from the first ``ATG`` found by character search, forward strand."""
    seq = sanitize(sequence)
    start = seq.find(START_CODON)
    if start < 0:
        return EMPTY
    return _translate_codons(to_codons(seq[start:]))


def _first_start(codons: List[str]) -> int:
    try:
        return codons.index(START_CODON)
    except ValueError:
        return -1


def translate_framed(
    sequence: str, frame: int = 0, strand: Strand | str = Strand.FORWARD
) -> Translation:
    """Translate from the first in-frame ``ATG`` codon on the chosen strand."""
    codons = tokenize(sequence, frame, strand)
    start = _first_start(codons)
    if start < 0:
        return EMPTY
    return _translate_codons(codons[start:])


def find_orf(
    sequence: str, frame: int = 0, strand: Strand | str = Strand.FORWARD
) -> OrfSpan | None:
    """Locate the first in-frame ORF, or ``None`` without a start codon."""
    codons = tokenize(sequence, frame, strand)
    start = _first_start(codons)
    if start < 0:
        return None
    for idx in range(start, len(codons)):
        if translate_codon(codons[idx]) == STOP_SYMBOL:
            return OrfSpan(start, idx, True)
    return OrfSpan(start, len(codons), False)

