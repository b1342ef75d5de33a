"""On-disk text cache for structure payloads, keyed by SHA-256."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


def cache_key(kind: str, value: str) -> str:
    return f"{kind}::{value}"


def _key_to_path(cache_dir: Path | None, key: str, suffix: str) -> Path | None:
    if cache_dir is None:
        return None
    digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
    return cache_dir / f"{digest}{suffix}"


def get_cached_text(key: str, cache_dir: Path | None, suffix: str = ".pdb") -> str | None:
    path = _key_to_path(cache_dir, key, suffix)
    if path is None or not path.exists():
        return None
    LOGGER.debug("Cache hit for %s", key)
    return path.read_text(encoding="utf-8")


def set_cached_text(key: str, value: str, cache_dir: Path | None, suffix: str = ".pdb") -> None:
    path = _key_to_path(cache_dir, key, suffix)
    if path is None:
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(value, encoding="utf-8")
