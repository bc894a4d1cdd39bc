"""Dictionary records and their JSON cache representation.

The cache file keeps the field names used by earlier releases of the tool
(``Definitions``, ``PartOfSpeech`` and so on), so a ``word_cache.json``
produced by them loads unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class MalformedResponse(ValueError):
    """Raised when a lookup payload does not have the expected entry shape."""


@dataclass
class Sense:
    part_of_speech: str
    definition: str
    example: str = ""
    synonyms: List[str] = field(default_factory=list)
    antonyms: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "PartOfSpeech": self.part_of_speech,
            "Definition": self.definition,
            "Example": self.example,
            "Synonyms": list(self.synonyms),
            "Antonyms": list(self.antonyms),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sense":
        return cls(
            part_of_speech=_as_str(data.get("PartOfSpeech")),
            definition=_as_str(data.get("Definition")),
            example=_as_str(data.get("Example")),
            synonyms=_as_str_list(data.get("Synonyms")),
            antonyms=_as_str_list(data.get("Antonyms")),
        )


@dataclass
class WordRecord:
    senses: List[Sense] = field(default_factory=list)
    phonetic: str = ""
    origin: str = ""
    synonyms: List[str] = field(default_factory=list)
    antonyms: List[str] = field(default_factory=list)

    def add_sense(self, sense: Sense) -> None:
        self.senses.append(sense)
        for synonym in sense.synonyms:
            if synonym not in self.synonyms:
                self.synonyms.append(synonym)
        for antonym in sense.antonyms:
            if antonym not in self.antonyms:
                self.antonyms.append(antonym)

    @property
    def examples(self) -> List[str]:
        return [sense.example for sense in self.senses if sense.example]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Definitions": [sense.to_dict() for sense in self.senses],
            "Phonetic": self.phonetic,
            "Origin": self.origin,
            "Synonyms": list(self.synonyms),
            "Antonyms": list(self.antonyms),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordRecord":
        senses = [
            Sense.from_dict(item)
            for item in data.get("Definitions") or []
            if isinstance(item, dict)
        ]
        return cls(
            senses=senses,
            phonetic=_as_str(data.get("Phonetic")),
            origin=_as_str(data.get("Origin")),
            synonyms=_as_str_list(data.get("Synonyms")),
            antonyms=_as_str_list(data.get("Antonyms")),
        )


@dataclass(frozen=True)
class Resolution:
    word: str
    record: Optional[WordRecord] = None

    @property
    def known(self) -> bool:
        return self.record is not None


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def decode_entry(payload: Any) -> WordRecord:
    """Build a :class:`WordRecord` from a dictionaryapi.dev response body.

    Only element 0 of the response array is consulted. Fields of the wrong
    type are ignored; a payload that is not a non-empty list of objects
    raises :class:`MalformedResponse`.
    """
    if not isinstance(payload, list) or not payload:
        raise MalformedResponse("expected a non-empty list of entries")
    entry = payload[0]
    if not isinstance(entry, dict):
        raise MalformedResponse("expected the first entry to be an object")

    record = WordRecord(phonetic=_as_str(entry.get("phonetic")), origin=_as_str(entry.get("origin")))
    if not record.phonetic:
        phonetics = entry.get("phonetics")
        for variant in phonetics if isinstance(phonetics, list) else []:
            if not isinstance(variant, dict):
                continue
            text = _as_str(variant.get("text"))
            if text:
                record.phonetic = text
                break

    meanings = entry.get("meanings")
    for meaning in meanings if isinstance(meanings, list) else []:
        if not isinstance(meaning, dict):
            continue
        part_of_speech = _as_str(meaning.get("partOfSpeech"))
        definitions = meaning.get("definitions")
        for item in definitions if isinstance(definitions, list) else []:
            if not isinstance(item, dict):
                continue
            record.add_sense(
                Sense(
                    part_of_speech=part_of_speech,
                    definition=_as_str(item.get("definition")),
                    example=_as_str(item.get("example")),
                    synonyms=_as_str_list(item.get("synonyms")),
                    antonyms=_as_str_list(item.get("antonyms")),
                )
            )
    return record
