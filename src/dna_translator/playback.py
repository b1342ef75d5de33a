"""Step-by-step reveal of a translation, driven by the caller."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterator, List

from .genetic_code import STOP_SYMBOL, translate_codon
from .translator import OrfSpan, find_orf
from .utils_seq import Strand, tokenize

LOGGER = logging.getLogger(__name__)

MIN_INTERVAL_MS = 150
MAX_INTERVAL_MS = 1200
DEFAULT_INTERVAL_MS = 600


@dataclass(frozen=True, slots=True)
class PlaybackStep:
    index: int
    codon: str
    amino_acid: str
    built: str


def clamp_interval(interval_ms: int) -> int:
    return max(MIN_INTERVAL_MS, min(MAX_INTERVAL_MS, int(interval_ms)))


class TranslationPlayback:
    """Walks the ORF codons one at a time; :meth:`cancel` stops the walk."""

    def __init__(
        self,
        sequence: str,
        frame: int = 0,
        strand: Strand | str = Strand.FORWARD,
        interval_ms: int = DEFAULT_INTERVAL_MS,
    ) -> None:
        self.codons: List[str] = tokenize(sequence, frame, strand)
        self.orf: OrfSpan | None = find_orf(sequence, frame, strand)
        self.interval_ms = clamp_interval(interval_ms)
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def reset(self) -> None:
        self._cancelled.clear()

    def steps(self) -> Iterator[PlaybackStep]:
        if self.orf is None:
            return
        built = ""
        for index in range(self.orf.start, self.orf.end):
            if self.cancelled:
                LOGGER.debug("Playback cancelled at codon %s", index)
                return
            codon = self.codons[index]
            symbol = translate_codon(codon)
            if symbol == STOP_SYMBOL:
                return
            built += symbol
            yield PlaybackStep(index, codon, symbol, built)

    def play(
        self,
        on_step: Callable[[PlaybackStep], None],
        sleep: Callable[[float], None] | None = None,
    ) -> str:
        """Call ``on_step`` for each step, pausing the interval in between."""
        sleep = sleep or time.sleep
        built = ""
        for step in self.steps():
            on_step(step)
            built = step.built
            if self.cancelled:
                break
            sleep(self.interval_ms / 1000)
        return built
