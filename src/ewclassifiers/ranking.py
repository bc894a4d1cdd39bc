"""Frequency counting and ordering of word phrases."""
from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from typing import Hashable, Iterable, List, TypeVar, Union

from .text import capitalize_phrase

T = TypeVar("T", bound=Hashable)


def count_frequencies(items: Iterable[str]) -> Counter[str]:
    return Counter(capitalize_phrase(item) for item in items)


def rank(items: Union[Mapping[str, int], Iterable[str]]) -> List[str]:
    """Order phrases by descending frequency, breaking ties on the lowercased phrase.

    A plain iterable is counted with :func:`count_frequencies` first, so the
    result holds title-cased phrases. A mapping is ranked as given.
    """
    counts = items if isinstance(items, Mapping) else count_frequencies(items)
    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0].lower(), kv[0]))
    return [phrase for phrase, _ in ordered]


def deduplicate(sequence: Iterable[T]) -> List[T]:
    seen = set()
    result: List[T] = []
    for item in sequence:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def merge_counts(target: Counter[str], source: Mapping[str, int]) -> Counter[str]:
    for phrase, count in source.items():
        target[phrase] += count
    return target
