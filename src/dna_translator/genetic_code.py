"""Standard genetic code lookups."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from Bio.Data.CodonTable import unambiguous_dna_by_id

# NCBI table 1, the standard code.
STANDARD_TABLE = unambiguous_dna_by_id[1]

START_CODON = "ATG"
STOP_CODONS = frozenset(STANDARD_TABLE.stop_codons)
STOP_SYMBOL = "*"
UNKNOWN_SYMBOL = "?"
UNKNOWN_THREE = "???"

CODON_TABLE: Mapping[str, str] = MappingProxyType(
    {
        **STANDARD_TABLE.forward_table,
        **{codon: STOP_SYMBOL for codon in STOP_CODONS},
    }
)

ONE_TO_THREE: Mapping[str, str] = MappingProxyType(
    {
        "A": "Ala", "R": "Arg", "N": "Asn", "D": "Asp", "C": "Cys",
        "Q": "Gln", "E": "Glu", "G": "Gly", "H": "His", "I": "Ile",
        "L": "Leu", "K": "Lys", "M": "Met", "F": "Phe", "P": "Pro",
        "S": "Ser", "T": "Thr", "W": "Trp", "Y": "Tyr", "V": "Val",
        "*": "Stop",
    }
)


def translate_codon(codon: str) -> str:
    """Return the one-letter symbol for a codon, or ``?`` when it is not one."""
    return CODON_TABLE.get(codon, UNKNOWN_SYMBOL)


def three_letter(symbol: str) -> str:
    return ONE_TO_THREE.get(symbol, UNKNOWN_THREE)


def codon_class(codon: str) -> str:
    """Classify a codon as ``start``, ``stop`` or ``other`` for highlighting."""
    if codon == START_CODON:
        return "start"
    if codon in STOP_CODONS:
        return "stop"
    return "other"
