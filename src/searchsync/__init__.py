"""Elasticsearch 기반 검색 인덱스 동기화 및 검색 계층.

레코드 저장소(source of truth)와 검색 인덱스를 일관되게 유지하고,
검색 요청(필터, 페이지네이션, 정렬)을 ES 쿼리로 변환한 뒤 결과를 순서 있는 레코드로 되돌립니다.

주요 컴포넌트:
    - BulkRequestBuilder / classify_bulk_response: bulk 동기화와 부분 실패 분류
    - FlushCoordinator: 레코드 타입 인덱스 비우기
    - SearchRequestFactory / SearchExecutor: 검색 body 컴파일 및 실행
    - ResultMapper / LazyResultMapper: hit -> 레코드 (eager / 커서 기반 lazy)
    - ElasticSearchEngine: 위 컴포넌트를 묶은 facade

Usage:
    >>> from searchsync import ESConfig, RecordType, SearchQuery, create_engine
    >>>
    >>> ARTICLES = RecordType(name="article", index_name="articles")
    >>> engine = create_engine(store=article_store).engine
    >>>
    >>> engine.sync_upsert(articles)
    >>> results = engine.search_page(SearchQuery(ARTICLES), page=1, per_page=20)
    >>> records = list(engine.lazy_map(SearchQuery(ARTICLES), results))
"""

from searchsync.bulk import BulkOperation, BulkRequestBuilder, classify_bulk_response
from searchsync.client import check_connection, create_es_client
from searchsync.config import ESConfig
from searchsync.engine import ElasticSearchEngine
from searchsync.errors import (
    BulkSyncFailure,
    DiagnosticSerializationFailure,
    MalformedResponse,
    NotSupportedForAggregateType,
    OperationNotSupported,
    SearchSyncError,
)
from searchsync.factory import EngineComponents, create_engine
from searchsync.flush import FlushCoordinator
from searchsync.mapping import LazyResultMapper, ResultMapper, map_ids
from searchsync.protocols import RecordStoreProtocol, SearchEngineProtocol
from searchsync.records import RecordRef, RecordType, SearchableRecord
from searchsync.search import (
    Hit,
    Pagination,
    SearchExecutor,
    SearchQuery,
    SearchRequestFactory,
    SearchResultSet,
    extract_total_count,
)

__all__ = [
    # Config / Client
    "ESConfig",
    "create_es_client",
    "check_connection",
    "EngineComponents",
    "create_engine",
    # Records
    "SearchableRecord",
    "RecordType",
    "RecordRef",
    "RecordStoreProtocol",
    "SearchEngineProtocol",
    # Bulk
    "BulkOperation",
    "BulkRequestBuilder",
    "classify_bulk_response",
    # Flush
    "FlushCoordinator",
    # Search
    "Hit",
    "Pagination",
    "SearchQuery",
    "SearchResultSet",
    "SearchRequestFactory",
    "SearchExecutor",
    "extract_total_count",
    # Mapping
    "ResultMapper",
    "LazyResultMapper",
    "map_ids",
    # Engine
    "ElasticSearchEngine",
    # Errors
    "SearchSyncError",
    "BulkSyncFailure",
    "DiagnosticSerializationFailure",
    "MalformedResponse",
    "NotSupportedForAggregateType",
    "OperationNotSupported",
]
