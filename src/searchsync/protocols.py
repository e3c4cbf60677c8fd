"""협력 객체 Protocol(인터페이스) 정의.

Protocol은 구조적 서브타이핑(Structural Subtyping)을 지원합니다.
구현체가 이 Protocol을 상속하지 않아도, 시그니처만 맞으면 호환됩니다.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Protocol

from .records import RecordType, SearchableRecord
from .search.types import SearchQuery, SearchResultSet


class RecordStoreProtocol(Protocol):
    """레코드 저장소 인터페이스.

    lazy 매핑에서 ID 목록으로 레코드를 커서 형태로 조회할 때 사용.
    반환 순서는 보장되지 않아도 됩니다.

    Example:
        >>> class SqlRecordStore:
        ...     def cursor_by_identities(self, record_type, identities):
        ...         ...  # SELECT ... WHERE id IN (...) 를 서버 커서로 순회
    """

    def cursor_by_identities(
        self, record_type: RecordType, identities: Sequence[str]
    ) -> Iterator[SearchableRecord]: ...


class SearchEngineProtocol(Protocol):
    """상위 레이어(CLI, HTTP 핸들러 등)가 사용하는 검색 엔진 인터페이스."""

    def sync_upsert(self, records: Iterable[SearchableRecord], refresh: bool | None = None) -> None: ...

    def sync_delete(self, records: Iterable[SearchableRecord], refresh: bool | None = None) -> None: ...

    def flush(self, record_type: RecordType) -> bool: ...

    def search(self, query: SearchQuery) -> Any: ...

    def search_page(self, query: SearchQuery, page: int, per_page: int) -> Any: ...

    def map(self, query: SearchQuery, result_set: SearchResultSet) -> list[Any]: ...

    def lazy_map(
        self, query: SearchQuery, result_set: SearchResultSet
    ) -> Iterator[SearchableRecord]: ...

    def get_total_count(self, result_set: Any) -> int: ...
