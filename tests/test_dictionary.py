import pytest
from wordlebot.datasets import dictionary as dictionary_mod
from wordlebot.datasets import fetch_words, load_dictionary, read_words, write_words
from wordlebot.engine import EmptyDictionary


def test_load_dictionary_normalizes_and_dedupes():
    d = load_dictionary(["Crane", "crane ", " ", "SLATE", "toolong", "ab1cd", "\tslate"])
    assert d.words == frozenset({"crane", "slate"})
    assert len(d) == 2 and d.length == 5
    assert "crane" in d and "CRANE" not in d
    assert list(d) == ["crane", "slate"]


def test_load_dictionary_other_length():
    d = load_dictionary(["letter", "crane", "settle"], length=6)
    assert set(d) == {"letter", "settle"}


@pytest.mark.parametrize("raw", [[], [""], ["abc", "toolong"]])
def test_empty_dictionary(raw):
    with pytest.raises(EmptyDictionary):
        load_dictionary(raw)


def test_read_write_words_roundtrip(tmp_path):
    p = write_words(["crane", "slate"], tmp_path / "sub" / "w.txt")
    assert read_words(p) == ["crane", "slate"]
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "missing.txt")


class _FakeResponse:
    text = "aahed\r\naalii\nABACK\n"

    def raise_for_status(self):
        return None


def test_fetch_words_uses_requests(monkeypatch):
    calls = {}

    def fake_get(url, timeout):
        calls["url"] = url
        calls["timeout"] = timeout
        return _FakeResponse()

    monkeypatch.setattr(dictionary_mod.requests, "get", fake_get)
    raw = fetch_words("https://example.invalid/words.txt", timeout=5)
    assert calls == {"url": "https://example.invalid/words.txt", "timeout": 5}
    assert load_dictionary(raw).words == frozenset({"aahed", "aalii", "aback"})
