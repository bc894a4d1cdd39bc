"""Token normalization and display helpers."""
from __future__ import annotations

import re
import unicodedata
from typing import List

import ftfy

ALLOWED_PUNCTUATION = {" ", "-", "/"}


def normalize_text(raw_text: str) -> str:
    text = ftfy.fix_text(raw_text)
    text = text.replace("\r\n", "\n")
    text = text.replace("\xa0", " ")
    text = re.sub(r"-\s*\n", "", text)
    text = unicodedata.normalize("NFC", text)
    return text


def split_paragraphs(text: str) -> List[str]:
    chunks = re.split(r"\n{2,}", text)
    return [" ".join(chunk.split()) for chunk in chunks if chunk.strip()]


def normalize(raw_token: str) -> List[str]:
    """Lowercase a token and split slash-joined compounds into trimmed parts."""
    return [part.strip() for part in raw_token.lower().split("/")]


def is_latin_letter(char: str) -> bool:
    if not char.isalpha():
        return False
    try:
        name = unicodedata.name(char)
    except ValueError:
        return False
    return name.startswith("LATIN ")


def is_eligible(word: str) -> bool:
    has_letter = False
    for char in word:
        if char in ALLOWED_PUNCTUATION:
            continue
        if not is_latin_letter(char):
            return False
        has_letter = True
    return has_letter


def capitalize_phrase(phrase: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in phrase.split())


def capitalize_sentence(sentence: str) -> str:
    if not sentence:
        return ""
    return sentence[0].upper() + sentence[1:]


def remove_empty_lines(text: str) -> str:
    return "\n".join(line for line in text.split("\n") if line.strip())
