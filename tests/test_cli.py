"""Admin CLI commands against an injected fake client."""

from __future__ import annotations

from conftest import FakeElasticsearch, search_response

from searchsync.cli import main


def test_no_command_prints_help(capsys):
    assert main([], es=FakeElasticsearch()) == 1
    assert "usage" in capsys.readouterr().out


def test_status(capsys):
    es = FakeElasticsearch(existing_indices={"articles"}, doc_counts={"articles": 1234})

    assert main(["status", "articles", "users"], es=es) == 0

    out = capsys.readouterr().out
    assert "✅ articles" in out
    assert "1,234" in out
    assert "❌ users" in out


def test_flush_requires_confirm():
    es = FakeElasticsearch(existing_indices={"articles"})

    assert main(["flush", "articles"], es=es) == 1
    assert es.called("delete_by_query") == []


def test_flush_confirmed():
    es = FakeElasticsearch(existing_indices={"articles"})

    assert main(["flush", "articles", "--confirm"], es=es) == 0
    assert es.called("delete_by_query")[0]["index"] == "articles"


def test_search_prints_ids_in_order(capsys):
    es = FakeElasticsearch(search_response=search_response([5, 3, 9], total=42))

    code = main(
        ["search", "articles", "--query", '{"match": {"title": "x"}}', "--page", "2", "--per-page", "3"],
        es=es,
    )

    assert code == 0
    body = es.called("search")[0]["body"]
    assert body == {"query": {"match": {"title": "x"}}, "from": 3, "size": 3}
    out = capsys.readouterr().out
    assert "Total: 42" in out
    ranked = [line.split()[1] for line in out.splitlines() if "(score=" in line]
    assert ranked == ["5", "3", "9"]


def test_search_rejects_bad_json():
    es = FakeElasticsearch()

    assert main(["search", "articles", "--query", "{not json"], es=es) == 1
    assert es.called("search") == []
