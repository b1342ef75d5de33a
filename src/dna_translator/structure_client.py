"""HTTP client for structure prediction (ESMFold) and PDB downloads (RCSB)."""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path

import requests

from .cache import cache_key, get_cached_text, set_cached_text
from .genetic_code import ONE_TO_THREE, STOP_SYMBOL

LOGGER = logging.getLogger(__name__)

ESMFOLD_URL = "https://api.esmatlas.com/foldSequence/v1/pdb/"
RCSB_URL = "https://files.rcsb.org/download"
MIN_STRUCTURE_LENGTH = 10

_PDB_ID = re.compile(r"^[0-9][A-Za-z0-9]{3}$")
_RESIDUES = frozenset(symbol for symbol in ONE_TO_THREE if symbol != STOP_SYMBOL)


class StructureRequestRejected(ValueError):
    """Raised when a request fails its precondition and is never sent."""


@dataclass(slots=True)
class StructureClientConfig:
    esmfold_url: str = ESMFOLD_URL
    rcsb_url: str = RCSB_URL
    min_length: int = MIN_STRUCTURE_LENGTH
    rate_limit_sec: float = 1.0
    timeout_sec: float = 120.0
    cache_dir: Path | None = None


def check_protein(protein: str, min_length: int = MIN_STRUCTURE_LENGTH) -> str:
    """Return the cleaned protein or raise :class:`StructureRequestRejected`."""
    cleaned = "".join((protein or "").split()).upper()
    if len(cleaned) < min_length:
        raise StructureRequestRejected(
            f"Protein must be at least {min_length} residues for structure "
            f"prediction, got {len(cleaned)}."
        )
    unexpected = sorted(set(cleaned) - _RESIDUES)
    if unexpected:
        raise StructureRequestRejected(
            f"Protein contains unsupported symbols: {''.join(unexpected)}"
        )
    return cleaned


def check_pdb_id(identifier: str) -> str:
    cleaned = (identifier or "").strip().upper()
    if not _PDB_ID.match(cleaned):
        raise StructureRequestRejected(f"Not a PDB identifier: {identifier!r}")
    return cleaned


class StructureClient:
    """Minimal helper for ESMFold predictions and RCSB downloads with rate limiting."""

    def __init__(
        self,
        config: StructureClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config or StructureClientConfig()
        if self._config.min_length < 1:
            raise ValueError("Structure minimum length must be positive.")
        self._session = session or requests.Session()
        self._last_call = 0.0

    def _throttle(self) -> None:
        now = time.monotonic()
        delta = now - self._last_call
        wait = max(0.0, self._config.rate_limit_sec - delta)
        if wait:
            time.sleep(wait)

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        self._throttle()
        LOGGER.info("%s %s", method, url)
        response = self._session.request(
            method, url, timeout=self._config.timeout_sec, **kwargs
        )
        response.raise_for_status()
        self._last_call = time.monotonic()
        return response

    def predict_structure(self, protein: str) -> str:
        """Return PDB text predicted by ESMFold for a one-letter protein."""
        sequence = check_protein(protein, self._config.min_length)
        key = cache_key("esmfold", sequence)
        cached = get_cached_text(key, self._config.cache_dir)
        if cached:
            return cached
        response = self._request(
            "POST",
            self._config.esmfold_url,
            data=sequence,
            headers={"Content-Type": "text/plain"},
        )
        set_cached_text(key, response.text, self._config.cache_dir)
        return response.text

    def fetch_pdb(self, identifier: str) -> str:
        """Download the PDB entry for ``identifier`` from RCSB."""
        pdb_id = check_pdb_id(identifier)
        key = cache_key("rcsb", pdb_id)
        cached = get_cached_text(key, self._config.cache_dir)
        if cached:
            return cached
        url = f"{self._config.rcsb_url.rstrip('/')}/{pdb_id}.pdb"
        response = self._request("GET", url)
        set_cached_text(key, response.text, self._config.cache_dir)
        return response.text
