"""spaCy adapter producing Penn Treebank tagged tokens."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, NamedTuple, Optional

try:
    import spacy
    from spacy.language import Language
except ImportError as exc:  # pragma: no cover - import guard
    raise SystemExit(
        "spaCy is required for this project. Install it with pip install -e ."
    ) from exc

from .text import normalize_text, split_paragraphs

LOGGER = logging.getLogger(__name__)
MODEL_CANDIDATES = ("en_core_web_lg", "en_core_web_md", "en_core_web_sm")


class TaggedToken(NamedTuple):
    text: str
    tag: str


def load_model(force_name: Optional[str] = None) -> Language:
    candidates = [force_name] if force_name else list(MODEL_CANDIDATES)
    for name in candidates:
        if not name:
            continue
        try:
            LOGGER.info("Loading spaCy model %s", name)
            # Only the tagger is needed.
            return spacy.load(name, exclude=["parser", "ner", "lemmatizer"])
        except OSError:
            LOGGER.info("spaCy model %s not found", name)
            continue
    raise SystemExit(
        "No English spaCy model available. Install one with python -m spacy download en_core_web_sm."
    )


class SpacyTagger:
    def __init__(self, nlp: Language, batch_size: int = 8) -> None:
        self.nlp = nlp
        self.batch_size = batch_size

    def tag(self, raw_text: str) -> Iterator[TaggedToken]:
        paragraphs = split_paragraphs(normalize_text(raw_text))
        for doc in self.nlp.pipe(self._fit(paragraphs), batch_size=self.batch_size):
            for token in doc:
                if token.is_space:
                    continue
                yield TaggedToken(token.text, token.tag_)

    def _fit(self, paragraphs: Iterable[str]) -> Iterator[str]:
        limit = self.nlp.max_length
        for paragraph in paragraphs:
            while len(paragraph) > limit:
                cut = paragraph.rfind(" ", 0, limit + 1)
                if cut <= 0:
                    cut = limit
                yield paragraph[:cut]
                paragraph = paragraph[cut:].lstrip()
            if paragraph:
                yield paragraph
