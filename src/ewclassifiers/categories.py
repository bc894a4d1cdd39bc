"""Penn Treebank tag to word category mapping."""
from __future__ import annotations

from typing import Dict, Tuple

NOUNS = "Nouns"
VERBS = "Verbs"
ADJECTIVES = "Adjectives"
ADVERBS = "Adverbs"
OTHER_WORDS = "OtherWords"
ALL_WORDS = "AllWords"

CATEGORIES: Tuple[str, ...] = (NOUNS, VERBS, ADJECTIVES, ADVERBS, OTHER_WORDS)

TAG_CATEGORIES: Dict[str, str] = {
    "NN": NOUNS,
    "NNS": NOUNS,
    "NNP": NOUNS,
    "NNPS": NOUNS,
    "VB": VERBS,
    "VBD": VERBS,
    "VBP": VERBS,
    "VBZ": VERBS,
    "VBG": VERBS,
    "JJ": ADJECTIVES,
    "JJR": ADJECTIVES,
    "JJS": ADJECTIVES,
    "RB": ADVERBS,
    "RBR": ADVERBS,
    "RBS": ADVERBS,
}


def categorize(tag: str) -> str:
    # VBN is deliberately absent and lands in OtherWords.
    return TAG_CATEGORIES.get(tag, OTHER_WORDS)
