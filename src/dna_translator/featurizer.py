"""Sequence cleaning and base composition."""

from __future__ import annotations

from dataclasses import asdict, dataclass

ALLOWED_BASES = frozenset("ATGC")


@dataclass(frozen=True, slots=True)
class BaseComposition:
    length: int
    a: int
    t: int
    g: int
    c: int
    gc_percent: int

    @property
    def gc(self) -> int:
        return self.g + self.c

    @property
    def at(self) -> int:
        return self.a + self.t

    def as_dict(self) -> dict:
        return asdict(self)


def sanitize(text: str | None) -> str:
    """Uppercase and keep only A, T, G and C."""
    upper = (text or "").upper()
    return "".join(ch for ch in upper if ch in ALLOWED_BASES)


def _percent(part: int, whole: int) -> int:
    # Half-up rounding, so 12.5 becomes 13 rather than 12.
    if not whole:
        return 0
    return (200 * part + whole) // (2 * whole)


def base_composition(sequence: str) -> BaseComposition:
    """Count each base of a canonical sequence in a single pass."""
    a = t = g = c = 0
    for ch in sequence:
        if ch == "A":
            a += 1
        elif ch == "T":
            t += 1
        elif ch == "G":
            g += 1
        elif ch == "C":
            c += 1
    length = len(sequence)
    return BaseComposition(
        length=length,
        a=a,
        t=t,
        g=g,
        c=c,
        gc_percent=_percent(g + c, length),
    )


def compute_features(sequence: str) -> dict:
    """Return simple descriptive statistics for a nucleotide sequence."""
    composition = base_composition(sequence)
    length = composition.length
    return {
        "length": length,
        "gc_percent": composition.gc_percent,
        "count_A": composition.a,
        "count_C": composition.c,
        "count_G": composition.g,
        "count_T": composition.t,
        "pct_A": round(composition.a / length * 100, 1) if length else 0.0,
        "pct_C": round(composition.c / length * 100, 1) if length else 0.0,
        "pct_G": round(composition.g / length * 100, 1) if length else 0.0,
        "pct_T": round(composition.t / length * 100, 1) if length else 0.0,
    }
