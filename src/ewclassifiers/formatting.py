"""Plain-text rendering of definitions and example sentences."""
from __future__ import annotations

import random
from typing import List, Optional

from .config import OutputOptions
from .models import WordRecord
from .text import capitalize_phrase, capitalize_sentence, remove_empty_lines

NO_DETAILS = "No details available."


def format_definitions(word: str, record: WordRecord, options: OutputOptions) -> str:
    title = capitalize_phrase(word)
    lines: List[str] = []
    if options.include_phonetic and record.phonetic:
        lines.append(f"{title} {record.phonetic}")
    else:
        lines.append(title)
    if options.include_origin and record.origin:
        lines.append(f"\tOrigin: {record.origin}")
    if not record.senses:
        lines.append(f"\t{title}: {NO_DETAILS}")
        return remove_empty_lines("\n".join(lines)) + "\n"

    # Numbering follows the position in the record, so filtered senses leave gaps.
    for number, sense in enumerate(record.senses, start=1):
        if options.filter_definitions_without_examples and not sense.example:
            continue
        lines.append(f"\t{title} {number}, {sense.part_of_speech}: {sense.definition}")
        if sense.example:
            lines.append(f"\t\t{title} {number} Example: {sense.example}")
        if options.include_synonyms and sense.synonyms:
            lines.append(f"\t\t{title} {number} Synonyms: {', '.join(sense.synonyms)}")
        if options.include_antonyms and sense.antonyms:
            lines.append(f"\t\t{title} {number} Antonyms: {', '.join(sense.antonyms)}")
    return remove_empty_lines("\n".join(lines)) + "\n"


def select_examples(
    examples: List[str], max_count: int, rng: Optional[random.Random] = None
) -> List[str]:
    """Return every example, or ``max_count`` of them drawn without replacement.

    Draws use ``rng.randrange`` on the remaining pool, so the result follows
    draw order. A ``max_count`` of zero means no limit.
    """
    if max_count <= 0 or max_count >= len(examples):
        return list(examples)
    rng = rng or random.Random()
    pool = list(examples)
    selected: List[str] = []
    for _ in range(max_count):
        selected.append(pool.pop(rng.randrange(len(pool))))
    return selected


def sample_examples(
    word: str,
    record: WordRecord,
    max_count: int = 0,
    rng: Optional[random.Random] = None,
) -> str:
    examples = [capitalize_sentence(example) for example in record.examples]
    if not examples:
        return ""
    lines = [capitalize_phrase(word)]
    lines.extend(f"\t{example}" for example in select_examples(examples, max_count, rng))
    return remove_empty_lines("\n".join(lines)) + "\n"
