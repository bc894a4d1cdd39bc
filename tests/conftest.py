import json
import pathlib
import sys
from urllib.parse import unquote

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from ewclassifiers.cache import UnknownWords, WordCache
from ewclassifiers.client import DictionaryClient
from ewclassifiers.resolver import WordResolver


LEAD_PAYLOAD = [
    {
        "word": "lead",
        "phonetic": "",
        "phonetics": [{"audio": ""}, {"text": "/liːd/"}, {"text": "/lɛd/"}],
        "origin": "Old English lǣdan",
        "meanings": [
            {
                "partOfSpeech": "verb",
                "definitions": [
                    {
                        "definition": "To guide or conduct.",
                        "example": "she led him to the door",
                        "synonyms": ["guide", "conduct"],
                        "antonyms": ["follow"],
                    },
                    {"definition": "To be in first place.", "synonyms": ["head"], "antonyms": []},
                ],
            },
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": "A heavy metal.",
                        "example": "the pipes were made of lead",
                        "synonyms": ["guide"],
                    },
                    "not a definition object",
                ],
            },
        ],
    }
]


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """Stands in for requests.Session; answers from a word -> response table."""

    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error
        self.calls = []

    def get(self, url, headers=None, timeout=None, proxies=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout, "proxies": proxies})
        if self.error is not None:
            raise self.error
        word = unquote(url.rsplit("/", 1)[-1])
        return self.responses.get(word, FakeResponse(404, {"title": "No Definitions Found"}))


class FakeTagger:
    """Tags by lookup table; unlisted words get NN and punctuation is tagged as itself."""

    def __init__(self, tags=None):
        self.tags = tags or {}

    def tag(self, raw_text):
        for raw in raw_text.replace(".", " . ").replace(",", " , ").split():
            if raw in {".", ","}:
                yield raw, raw
            else:
                yield raw, self.tags.get(raw.lower(), "NN")


@pytest.fixture
def lead_payload():
    return json.loads(json.dumps(LEAD_PAYLOAD))


@pytest.fixture
def session(lead_payload):
    return FakeSession({"lead": FakeResponse(200, lead_payload)})


@pytest.fixture
def client(session):
    return DictionaryClient(session=session)


@pytest.fixture
def resolver(tmp_path, client):
    cache = WordCache(tmp_path / "word_cache.json").load()
    unknown = UnknownWords(tmp_path / "word_unknown.json").load(known=cache)
    return WordResolver(cache, unknown, client)
