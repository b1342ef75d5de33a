"""Codon usage, amino-acid composition and molecular weight."""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import List, Mapping

from .utils_seq import Strand, tokenize

WATER_MASS = 18.015

# Average free amino-acid masses in daltons.
RESIDUE_MASS: Mapping[str, float] = MappingProxyType(
    {
        "A": 89.09, "R": 174.20, "N": 132.12, "D": 133.10, "C": 121.16,
        "Q": 146.15, "E": 147.13, "G": 75.07, "H": 155.16, "I": 131.18,
        "L": 131.18, "K": 146.19, "M": 149.21, "F": 165.19, "P": 115.13,
        "S": 105.09, "T": 119.12, "W": 204.23, "Y": 181.19, "V": 117.15,
    }
)


def codon_usage(
    sequence: str, frame: int = 0, strand: Strand | str = Strand.FORWARD
) -> Counter:
    """Count every codon of the tokenized stream, not only the ORF."""
    return Counter(tokenize(sequence, frame, strand))


def amino_acid_composition(protein: str) -> Counter:
    return Counter(protein or "")


def estimate_molecular_weight(protein: str) -> float:
    """Approximate protein mass in daltons.

    Each recognized residue contributes its mass minus one water lost to the
    peptide bond; one water is added back for the termini. Unknown symbols
    contribute nothing.
    """
    total = WATER_MASS
    for symbol in protein or "":
        mass = RESIDUE_MASS.get(symbol)
        if mass is None:
            continue
        total += mass - WATER_MASS
    return total


def protein_stats(protein: str) -> dict:
    weight = estimate_molecular_weight(protein)
    return {
        "protein_length": len(protein or ""),
        "molecular_weight_da": round(weight, 2),
        "molecular_weight_kda": round(weight / 1000, 2),
    }


def histogram_rows(counts: Mapping[str, int], key: str) -> List[dict]:
    """Sorted rows with each count relative to the largest one."""
    peak = max([1, *counts.values()])
    return [
        {key: symbol, "count": count, "relative": round(count / peak, 4)}
        for symbol, count in sorted(counts.items())
    ]
