"""Persistent word caches.

``WordCache`` holds resolved dictionary records, ``UnknownWords`` holds words
the dictionary could not define. Both rewrite their whole JSON file after
every mutation; pass ``path=None`` to keep a repository in memory only.
"""
from __future__ import annotations

import json
import logging
import os
from contextlib import suppress
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Dict, Iterator, Optional, Set

from .models import WordRecord

LOGGER = logging.getLogger(__name__)
DEFAULT_CACHE_PATH = Path("word_cache.json")
DEFAULT_UNKNOWN_PATH = Path("word_unknown.json")
CACHE_FILE_MODE = 0o644


def _read_json_object(path: Optional[Path]) -> Dict[str, Any]:
    if path is None or not path.exists():
        return {}
    try:
        with open(path, "rt", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        LOGGER.warning("Ignoring unreadable cache file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        LOGGER.warning("Ignoring cache file %s: expected a JSON object", path)
        return {}
    return data


def _write_json_object(path: Path, data: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    handle = NamedTemporaryFile(
        "wt", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", delete=False
    )
    try:
        with handle:
            json.dump(data, handle, indent=2, ensure_ascii=False)
        # NamedTemporaryFile creates 0600 files.
        os.chmod(handle.name, CACHE_FILE_MODE)
        os.replace(handle.name, path)
    except BaseException:
        with suppress(OSError):
            os.unlink(handle.name)
        raise


class WordCache:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path
        self._records: Dict[str, WordRecord] = {}

    def load(self) -> "WordCache":
        self._records.clear()
        for word, blob in _read_json_object(self.path).items():
            if not isinstance(blob, dict):
                continue
            record = WordRecord.from_dict(blob)
            if not record.senses:
                LOGGER.debug("Dropping cached entry %s without definitions", word)
                continue
            self._records[word.lower()] = record
        LOGGER.info("Loaded %s cached words", len(self._records))
        return self

    def flush(self) -> None:
        if self.path is None:
            return
        _write_json_object(self.path, {word: record.to_dict() for word, record in self._records.items()})

    def get(self, word: str) -> Optional[WordRecord]:
        return self._records.get(word.lower())

    def put(self, word: str, record: WordRecord) -> None:
        if not record.senses:
            raise ValueError(f"refusing to cache {word!r} without definitions")
        self._records[word.lower()] = record
        self.flush()

    def delete(self, word: str) -> None:
        if self._records.pop(word.lower(), None) is not None:
            self.flush()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)


class UnknownWords:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path
        self._words: Set[str] = set()

    def load(self, known: Optional[WordCache] = None) -> "UnknownWords":
        self._words = {word.lower() for word, flag in _read_json_object(self.path).items() if flag}
        if known is not None:
            overlap = {word for word in self._words if word in known}
            if overlap:
                LOGGER.info("Dropping %s unknown words that are cached as known", len(overlap))
                self._words -= overlap
        LOGGER.info("Loaded %s unknown words", len(self._words))
        return self

    def flush(self) -> None:
        if self.path is None:
            return
        _write_json_object(self.path, {word: True for word in sorted(self._words)})

    def add(self, word: str) -> None:
        self._words.add(word.lower())
        self.flush()

    def discard(self, word: str) -> None:
        key = word.lower()
        if key in self._words:
            self._words.remove(key)
            self.flush()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))
