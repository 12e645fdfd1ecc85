import json

import pytest

from pagecrawl import main as cli


def _fake_fetch(html):
    async def fetch(session, url, cfg):
        return html

    return fetch


def test_no_arguments(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 1
    assert "No arguments" in capsys.readouterr().err


def test_too_many_arguments(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["https://a.example", "https://b.example"])
    assert exc.value.code == 1
    assert "Too many arguments" in capsys.readouterr().err


def test_crawl_prints_page_data(monkeypatch, capsys):
    html = '<h1>Hello</h1><main><p>Lead</p></main><a href="/next">n</a><img src="i.png">'
    monkeypatch.setattr(cli, "fetch_html", _fake_fetch(html))
    cli.main(["https://blog.boot.dev/blog/"])
    out = capsys.readouterr().out
    assert out.startswith("Crawling at https://blog.boot.dev/blog/\n")
    data = json.loads(out.split("\n", 1)[1])
    assert data == {
        "url": "https://blog.boot.dev/blog/",
        "h1": "Hello",
        "first_paragraph": "Lead",
        "outgoing_links": ["https://blog.boot.dev/next"],
        "image_urls": ["https://blog.boot.dev/blog/i.png"],
    }


def test_crawl_without_html(monkeypatch, capsys):
    monkeypatch.setattr(cli, "fetch_html", _fake_fetch(None))
    with pytest.raises(SystemExit) as exc:
        cli.main(["https://blog.boot.dev"])
    assert exc.value.code == 1
    assert "No HTML content at https://blog.boot.dev" in capsys.readouterr().err


def test_canonical_flag(monkeypatch, capsys):
    monkeypatch.setattr(cli, "fetch_html", _fake_fetch("<h1>x</h1>"))
    cli.main(["--canonical", "https://BLOG.boot.dev:443/path/"])
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Canonical: blog.boot.dev/path"


def test_canonical_flag_invalid_url(monkeypatch, capsys):
    called = []

    async def fetch(session, url, cfg):
        called.append(url)
        return "<h1>x</h1>"

    monkeypatch.setattr(cli, "fetch_html", fetch)
    with pytest.raises(SystemExit) as exc:
        cli.main(["--canonical", "   "])
    assert exc.value.code == 1
    assert "Invalid URL" in capsys.readouterr().err
    assert called == []


def test_unknown_log_level_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--log-level", "verbose", "https://blog.boot.dev"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_log_level_flag_is_case_insensitive(monkeypatch, capsys):
    monkeypatch.setattr(cli, "fetch_html", _fake_fetch("<h1>x</h1>"))
    cli.main(["--log-level", "debug", "https://blog.boot.dev"])
    assert "Crawling at https://blog.boot.dev" in capsys.readouterr().out


def test_unknown_log_level_env(monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit) as exc:
        cli.main(["https://blog.boot.dev"])
    assert exc.value.code == 1
    assert "LOG_LEVEL" in capsys.readouterr().err
