"""Search body compilation, execution and total-count extraction."""

from __future__ import annotations

import pytest
from conftest import ARTICLES, FakeElasticsearch, search_response

from searchsync import (
    MalformedResponse,
    Pagination,
    SearchExecutor,
    SearchQuery,
    SearchRequestFactory,
    SearchResultSet,
    extract_total_count,
)


class TestSearchRequestFactory:
    @pytest.mark.parametrize(
        ("page", "per_page", "expected_from"),
        [(1, 10, 0), (2, 10, 10), (3, 25, 50)],
    )
    def test_pagination_maps_to_from_and_size(self, page, per_page, expected_from):
        body = SearchRequestFactory().create_page(SearchQuery(ARTICLES), page, per_page)

        assert body["from"] == expected_from
        assert body["size"] == per_page

    def test_plain_search_omits_from_and_size(self):
        body = SearchRequestFactory().create(SearchQuery(ARTICLES))

        assert body == {"query": {"match_all": {}}}

    def test_filter_sort_and_limit_are_compiled(self):
        criteria = {"bool": {"filter": [{"term": {"status": "published"}}]}}
        query = SearchQuery(ARTICLES, filter_criteria=criteria, sort=[{"created_at": "desc"}], limit=5)

        body = SearchRequestFactory().create(query)

        assert body == {"query": criteria, "sort": [{"created_at": "desc"}], "size": 5}

    def test_pagination_overrides_limit(self):
        body = SearchRequestFactory().create(SearchQuery(ARTICLES, limit=5), Pagination(2, 20))

        assert (body["from"], body["size"]) == (20, 20)

    @pytest.mark.parametrize(("page", "per_page"), [(0, 10), (-1, 10), (1, 0)])
    def test_invalid_pagination_is_rejected(self, page, per_page):
        with pytest.raises(ValueError):
            Pagination(page=page, per_page=per_page)


class TestTotalCount:
    def test_reads_hits_total_value(self):
        assert extract_total_count({"hits": {"total": {"value": 42}, "hits": []}}) == 42

    def test_accepts_integer_total(self):
        assert extract_total_count({"hits": {"total": 7, "hits": []}}) == 7

    @pytest.mark.parametrize(
        "response",
        [{}, {"hits": {"hits": []}}, {"hits": {"total": {"relation": "eq"}}}, {"hits": {"total": None}}],
    )
    def test_missing_total_is_malformed(self, response):
        with pytest.raises(MalformedResponse) as exc_info:
            extract_total_count(response)
        assert exc_info.value.field == "hits.total.value"


class TestSearchResultSet:
    def test_hits_keep_response_order(self):
        result = SearchResultSet.from_response(search_response([5, 3, 9], total=120))

        assert result.identities == ["5", "3", "9"]
        assert result.total_count == 120
        assert result.hits[0].index == "articles"
        assert result.hits[0].source == {"id": 5}

    def test_missing_hit_list_means_zero_hits(self):
        result = SearchResultSet.from_response({"hits": {"total": {"value": 0}}})

        assert len(result) == 0


class TestSearchExecutor:
    def test_uses_record_type_index(self):
        es = FakeElasticsearch(search_response=search_response([1, 2]))

        result = SearchExecutor(es).execute(SearchQuery(ARTICLES))

        assert es.called("search") == [{"index": "articles", "body": {"query": {"match_all": {}}}}]
        assert result.identities == ["1", "2"]

    def test_index_override_takes_precedence(self):
        es = FakeElasticsearch()

        SearchExecutor(es).execute(SearchQuery(ARTICLES, index="articles_v2"))

        assert es.called("search")[0]["index"] == "articles_v2"

    def test_escalation_callback_receives_client_and_body(self):
        es = FakeElasticsearch()
        seen = {}
        sentinel = object()

        def callback(client, body):
            seen["client"] = client
            seen["body"] = body
            return sentinel

        query = SearchQuery(ARTICLES, escalation_callback=callback)
        result = SearchExecutor(es).execute(query, Pagination(2, 10))

        assert result is sentinel
        assert seen["client"] is es
        assert seen["body"] == {"query": {"match_all": {}}, "from": 10, "size": 10}
        assert es.called("search") == []

    def test_missing_total_raises(self):
        es = FakeElasticsearch(search_response={"hits": {"hits": []}})

        with pytest.raises(MalformedResponse):
            SearchExecutor(es).execute(SearchQuery(ARTICLES))
