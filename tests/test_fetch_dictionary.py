from pathlib import Path

from script import fetch_dictionary


class _FakeResponse:
    def __init__(self, text, content_type):
        self.text = text
        self.headers = {"Content-Type": content_type}

    def raise_for_status(self):
        pass


def test_extract_words_plain_text():
    text = "Crane\nstack\ncranes\nCRANE\nab1cd\ntruck\n"
    assert fetch_dictionary.extract_words(text, 5) == ["crane", "stack", "truck"]


def test_extract_words_html_ignores_markup():
    html = "<html><body><table><tr><td>Crane</td><td>Stack</td></tr></table>" \
           "<script>var about = 1;</script></body></html>"
    words = fetch_dictionary.extract_words(html, 5, html=True)
    assert words[:2] == ["crane", "stack"]
    assert "table" not in words


def test_fetch_words_uses_content_type(monkeypatch, tmp_path: Path):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return _FakeResponse("<p>myths hitch</p>", "text/html; charset=utf-8")

    monkeypatch.setattr(fetch_dictionary.requests, "get", fake_get)
    assert fetch_dictionary.fetch_words("https://example.org/w", 5) == ["myths", "hitch"]
    assert calls == ["https://example.org/w"]
