"""Search layer: 요청 컴파일, 실행, 응답 타입."""

from .executor import SearchExecutor
from .factory import SearchRequestFactory
from .types import Hit, Pagination, SearchQuery, SearchResultSet, extract_total_count

__all__ = [
    # 공용 타입
    "Hit",
    "Pagination",
    "SearchQuery",
    "SearchResultSet",
    "extract_total_count",
    # 요청 컴파일 / 실행
    "SearchRequestFactory",
    "SearchExecutor",
]
