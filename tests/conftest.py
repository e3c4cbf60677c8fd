"""Pytest fixtures: in-memory fakes of the Elasticsearch client and record store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from searchsync import ESConfig, ElasticSearchEngine, RecordType

ARTICLES = RecordType(name="article", index_name="articles")
USERS = RecordType(name="user", index_name="users")


@dataclass
class Article:
    id: int | None
    title: str
    index: str = "articles"

    def get_search_key(self) -> int | None:
        return self.id

    def searchable_as(self) -> str:
        return self.index

    def to_search_document(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title}


class FakeIndices:
    def __init__(self, existing: set[str]):
        self.existing = existing
        self.calls: list[tuple[str, str]] = []

    def exists(self, *, index: str) -> bool:
        self.calls.append(("exists", index))
        return index in self.existing

    def refresh(self, *, index: str) -> dict[str, Any]:
        self.calls.append(("refresh", index))
        return {"_shards": {"total": 1, "successful": 1, "failed": 0}}


@dataclass
class FakeElasticsearch:
    """Records every call and answers with canned responses."""

    bulk_response: dict[str, Any] = field(default_factory=lambda: {"errors": False, "items": []})
    search_response: dict[str, Any] = field(
        default_factory=lambda: {"hits": {"total": {"value": 0, "relation": "eq"}, "hits": []}}
    )
    existing_indices: set[str] = field(default_factory=set)
    doc_counts: dict[str, int] = field(default_factory=dict)
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.indices = FakeIndices(self.existing_indices)

    def bulk(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("bulk", kwargs))
        return self.bulk_response

    def search(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("search", kwargs))
        return self.search_response

    def delete_by_query(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("delete_by_query", kwargs))
        return {"deleted": self.doc_counts.get(kwargs["index"], 0)}

    def count(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("count", kwargs))
        return {"count": self.doc_counts.get(kwargs["index"], 0)}

    def ping(self) -> bool:
        return True

    def called(self, name: str) -> list[dict[str, Any]]:
        return [kwargs for n, kwargs in self.calls if n == name]


class FakeRecordStore:
    """Returns stored records in reverse request order; ids not stored are omitted."""

    def __init__(self, records: list[Article], extra: list[Article] | None = None):
        self.records = {str(r.id): r for r in records}
        self.extra = extra or []
        self.requests: list[list[str]] = []

    def cursor_by_identities(self, record_type: RecordType, identities: list[str]):
        self.requests.append(list(identities))
        for identity in reversed(list(identities)):
            if identity in self.records:
                yield self.records[identity]
        yield from self.extra


def search_response(ids: list[Any], total: int | None = None, index: str = "articles") -> dict[str, Any]:
    hits = [
        {"_index": index, "_id": str(i), "_score": float(len(ids) - n), "_source": {"id": i}}
        for n, i in enumerate(ids)
    ]
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": len(ids) if total is None else total, "relation": "eq"},
            "hits": hits,
        },
    }


@pytest.fixture(autouse=True)
def es_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ES_URL", "http://localhost:9200")
    for name in (
        "ES_USERNAME",
        "ES_PASSWORD",
        "ES_REFRESH_ON_WRITE",
        "ES_VERIFY_DELETES",
        "ES_LAZY_CHUNK_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cfg() -> ESConfig:
    return ESConfig(es_url="http://localhost:9200")


@pytest.fixture
def es() -> FakeElasticsearch:
    return FakeElasticsearch()


@pytest.fixture
def store() -> FakeRecordStore:
    return FakeRecordStore([Article(5, "five"), Article(3, "three"), Article(9, "nine")])


@pytest.fixture
def engine(es: FakeElasticsearch, store: FakeRecordStore, cfg: ESConfig) -> ElasticSearchEngine:
    return ElasticSearchEngine(es, store=store, cfg=cfg)
