# tests/test_cache.py
"""Tests for the persistent word caches."""

import json
import stat

import pytest

from ewclassifiers import cache as cache_module
from ewclassifiers.cache import UnknownWords, WordCache
from ewclassifiers.models import Sense, WordRecord, decode_entry


@pytest.fixture
def record():
    record = WordRecord(phonetic="/fɒks/")
    record.add_sense(Sense("noun", "A wild canine.", "the fox ran", ["vixen"], []))
    record.add_sense(Sense("verb", "To trick.", "", ["trick", "vixen"], ["help"]))
    return record


def test_put_flushes_pretty_printed_json(tmp_path, record):
    path = tmp_path / "word_cache.json"
    cache = WordCache(path)
    cache.put("Fox", record)

    text = path.read_text(encoding="utf-8")
    assert text.startswith("{\n  ")
    data = json.loads(text)
    assert list(data) == ["fox"]
    assert data["fox"]["Phonetic"] == "/fɒks/"


def test_round_trip_preserves_records(tmp_path, record, lead_payload):
    path = tmp_path / "word_cache.json"
    cache = WordCache(path)
    cache.put("fox", record)
    cache.put("lead", decode_entry(lead_payload))

    reloaded = WordCache(path).load()

    assert set(reloaded) == {"fox", "lead"}
    assert len(reloaded.get("lead").senses) == 3
    assert reloaded.get("fox").synonyms == ["vixen", "trick"]
    assert reloaded.get("fox").antonyms == ["help"]
    assert reloaded.get("FOX") == record


def test_flushed_file_is_world_readable(tmp_path, record):
    path = tmp_path / "word_cache.json"
    WordCache(path).put("fox", record)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


@pytest.mark.parametrize("target", ["dump", "replace"])
def test_failed_flush_leaves_no_temporary_file(tmp_path, record, monkeypatch, target):
    path = tmp_path / "word_cache.json"
    cache = WordCache(path)
    cache.put("fox", record)
    before = path.read_text(encoding="utf-8")

    def fail(*args, **kwargs):
        raise OSError("disk full")

    if target == "dump":
        monkeypatch.setattr(cache_module.json, "dump", fail)
    else:
        monkeypatch.setattr(cache_module.os, "replace", fail)
    with pytest.raises(OSError):
        cache.put("vixen", record)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["word_cache.json"]
    assert path.read_text(encoding="utf-8") == before


def test_put_refuses_records_without_senses(tmp_path):
    cache = WordCache(tmp_path / "word_cache.json")
    with pytest.raises(ValueError):
        cache.put("empty", WordRecord())
    assert "empty" not in cache


def test_load_drops_entries_without_definitions(tmp_path, record):
    path = tmp_path / "word_cache.json"
    path.write_text(
        json.dumps({"fox": record.to_dict(), "hollow": {"Definitions": []}, "junk": 3}),
        encoding="utf-8",
    )
    cache = WordCache(path).load()
    assert list(cache) == ["fox"]


def test_load_tolerates_corrupt_file(tmp_path):
    path = tmp_path / "word_cache.json"
    path.write_text("{not json", encoding="utf-8")
    assert len(WordCache(path).load()) == 0


def test_delete_flushes(tmp_path, record):
    path = tmp_path / "word_cache.json"
    cache = WordCache(path)
    cache.put("fox", record)
    cache.delete("fox")
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_in_memory_cache_writes_nothing(tmp_path, record):
    cache = WordCache()
    cache.put("fox", record)
    assert "fox" in cache
    assert list(tmp_path.iterdir()) == []


def test_unknown_words_persist_as_true_flags(tmp_path):
    path = tmp_path / "word_unknown.json"
    unknown = UnknownWords(path)
    unknown.add("Xyzzy")
    unknown.add("blorb")

    assert json.loads(path.read_text(encoding="utf-8")) == {"blorb": True, "xyzzy": True}
    assert "XYZZY" in UnknownWords(path).load()


def test_unknown_words_discard(tmp_path):
    path = tmp_path / "word_unknown.json"
    unknown = UnknownWords(path)
    unknown.add("xyzzy")
    unknown.discard("xyzzy")
    unknown.discard("never-added")
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_unknown_load_drops_words_known_to_cache(tmp_path, record):
    cache = WordCache()
    cache.put("fox", record)
    path = tmp_path / "word_unknown.json"
    path.write_text(json.dumps({"fox": True, "xyzzy": True, "maybe": False}), encoding="utf-8")

    unknown = UnknownWords(path).load(known=cache)

    assert list(unknown) == ["xyzzy"]
