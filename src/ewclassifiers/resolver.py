"""Word resolution through the known-word cache, the unknown-word set and the dictionary client."""
from __future__ import annotations

import logging
from typing import Optional

from .cache import UnknownWords, WordCache
from .client import DictionaryClient
from .models import MalformedResponse, Resolution, WordRecord, decode_entry

LOGGER = logging.getLogger(__name__)


class WordResolver:
    """Resolve words against the two caches, falling back to the dictionary service.

    Every failure (transport, status, payload, no definitions) is folded into
    an unknown outcome and remembered in ``unknown``. With
    ``query_unknown_words`` set, remembered unknowns are looked up again.
    """

    def __init__(
        self,
        cache: WordCache,
        unknown: UnknownWords,
        client: DictionaryClient,
        *,
        query_unknown_words: bool = False,
    ) -> None:
        self.cache = cache
        self.unknown = unknown
        self.client = client
        self.query_unknown_words = query_unknown_words
        self.fetches = 0
        self.cache_hits = 0

    def resolve(self, word: str) -> Resolution:
        word = word.lower()
        if word in self.unknown and not self.query_unknown_words:
            return Resolution(word)
        record = self.cache.get(word)
        if record is not None:
            self.cache_hits += 1
            return Resolution(word, record)

        self.fetches += 1
        payload = self.client.fetch(word)
        if payload is None:
            return self._mark_unknown(word)
        try:
            record = decode_entry(payload)
        except MalformedResponse as exc:
            LOGGER.info("Unusable dictionary entry for %s: %s", word, exc)
            return self._mark_unknown(word)
        if not record.senses:
            LOGGER.info("No definitions for %s", word)
            return self._mark_unknown(word)

        self.cache.put(word, record)
        self.unknown.discard(word)
        return Resolution(word, record)

    def cached(self, word: str) -> Optional[WordRecord]:
        word = word.lower()
        if word in self.unknown:
            return None
        return self.cache.get(word)

    def _mark_unknown(self, word: str) -> Resolution:
        self.unknown.add(word)
        return Resolution(word)
