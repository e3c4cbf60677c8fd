"""Elasticsearch 검색 엔진 (동기화 + 검색 + 결과 매핑).

레코드 저장소와 검색 인덱스 사이의 상태 없는 변환 계층입니다.
모든 상태는 요청 단위이므로 하나의 인스턴스를 여러 스레드에서 공유해도 됩니다.

Usage:
    >>> cfg = ESConfig()
    >>> engine = ElasticSearchEngine(create_es_client(cfg), store, cfg)
    >>>
    >>> engine.sync_upsert(articles)
    >>> results = engine.search_page(SearchQuery(ARTICLES), page=2, per_page=10)
    >>> for article in engine.lazy_map(query, results):
    ...     print(article.title)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from elasticsearch import Elasticsearch

from .bulk import BulkOperationType, BulkRequestBuilder, classify_bulk_response, failed_items
from .config import ESConfig
from .errors import OperationNotSupported
from .flush import FlushCoordinator
from .mapping import LazyResultMapper, ResultMapper, map_ids
from .protocols import RecordStoreProtocol
from .records import RecordType, SearchableRecord
from .search import Pagination, SearchExecutor, SearchQuery, SearchResultSet, extract_total_count

logger = logging.getLogger(__name__)


class ElasticSearchEngine:
    """SearchEngineProtocol 구현체."""

    def __init__(
        self,
        es: Elasticsearch,
        store: RecordStoreProtocol | None = None,
        cfg: ESConfig | None = None,
    ):
        self.es = es
        self.store = store
        self.cfg = cfg or ESConfig()

        self.bulk_builder = BulkRequestBuilder()
        self.flusher = FlushCoordinator(es)
        self.executor = SearchExecutor(es)
        self.mapper = ResultMapper()

    # =========================================================================
    # Sync
    # =========================================================================

    def _bulk(
        self,
        records: Iterable[SearchableRecord],
        operation: BulkOperationType,
        refresh: bool | None,
    ) -> Any:
        records = list(records)
        if not records:
            logger.debug(f"Bulk {operation} 생략: 레코드 없음")
            return None

        payload = self.bulk_builder.build(records, operation)
        indices = sorted({r.searchable_as() for r in records})
        logger.debug(f"Bulk {operation}: {len(records)}건, 인덱스 {indices}")
        return self.es.bulk(operations=payload, refresh=self.cfg.refresh_param(refresh))

    def sync_upsert(self, records: Iterable[SearchableRecord], refresh: bool | None = None) -> None:
        """레코드를 인덱스에 upsert.

        Raises:
            BulkSyncFailure: 하나 이상의 항목이 실패한 경우.
            DiagnosticSerializationFailure: 실패 응답을 직렬화할 수 없는 경우.
            ValueError: 검색 키가 없는 레코드가 있는 경우.
        """
        resp = self._bulk(records, "index", refresh)
        if resp is not None:
            classify_bulk_response(resp, "index")

    def sync_delete(self, records: Iterable[SearchableRecord], refresh: bool | None = None) -> None:
        """레코드를 인덱스에서 삭제.

        verify_deletes=False면 응답을 검사하지 않고(fire-and-forget) 실패 ID만 경고 로그로 남깁니다.
        """
        resp = self._bulk(records, "delete", refresh)
        if resp is None:
            return
        if self.cfg.verify_deletes:
            classify_bulk_response(resp, "delete")
            return

        failed = failed_items(getattr(resp, "body", resp))
        if failed:
            logger.warning(f"Bulk delete 실패 무시: {[identity for identity, _, _ in failed]}")

    update = sync_upsert
    delete = sync_delete

    def flush(self, record_type: RecordType) -> bool:
        """레코드 타입의 인덱스를 비움. 인덱스가 없으면 아무 것도 하지 않음."""
        return self.flusher.flush(record_type)

    # =========================================================================
    # Search
    # =========================================================================

    def search(self, query: SearchQuery) -> SearchResultSet | Any:
        """페이지네이션 없는 검색 (limit이 있으면 size로 사용)."""
        return self.executor.execute(query)

    def search_page(self, query: SearchQuery, page: int, per_page: int) -> SearchResultSet | Any:
        """페이지 검색. page는 1부터 시작."""
        return self.executor.execute(query, Pagination(page=page, per_page=per_page))

    def paginate(self, query: SearchQuery, per_page: int, page: int) -> SearchResultSet | Any:
        return self.search_page(query, page=page, per_page=per_page)

    # =========================================================================
    # Mapping
    # =========================================================================

    def map_ids(self, result_set: SearchResultSet) -> list[str]:
        return map_ids(result_set)

    def map(self, query: SearchQuery, result_set: SearchResultSet) -> list[Any]:
        """hit 순서대로 변환 결과 또는 RecordRef 목록 반환."""
        return self.mapper.map(result_set, query.result_transform)

    def lazy_map(self, query: SearchQuery, result_set: SearchResultSet) -> Iterator[SearchableRecord]:
        """저장소 레코드를 hit 순서대로 흘려보내는 이터레이터 반환.

        Raises:
            NotSupportedForAggregateType: 집계 레코드 타입인 경우.
            ValueError: 레코드 저장소가 설정되지 않은 경우.
        """
        if self.store is None:
            raise ValueError("lazy 매핑에는 레코드 저장소(store)가 필요합니다.")
        mapper = LazyResultMapper(self.store, chunk_size=self.cfg.lazy_chunk_size)
        return mapper.map(query.record_type, result_set)

    def get_total_count(self, result_set: SearchResultSet | Mapping[str, Any]) -> int:
        """전체 hit 수 (hits.total.value).

        Raises:
            MalformedResponse: total 필드가 없는 경우.
        """
        if isinstance(result_set, SearchResultSet):
            return result_set.total_count
        return extract_total_count(getattr(result_set, "body", result_set))

    # =========================================================================
    # Index administration (지원하지 않음)
    # =========================================================================

    def create_index(self, name: str, **options: Any) -> Any:
        raise OperationNotSupported("create_index")

    def delete_index(self, name: str) -> Any:
        raise OperationNotSupported("delete_index")
