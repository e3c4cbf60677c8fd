"""검색 실행기."""

from __future__ import annotations

import logging
from typing import Any

from elasticsearch import Elasticsearch

from .factory import SearchRequestFactory
from .types import Pagination, SearchQuery, SearchResultSet

logger = logging.getLogger(__name__)


class SearchExecutor:
    """컴파일된 검색 요청(또는 escalation callback)을 실행.

    escalation callback이 있으면 (client, body)로 호출하고 반환값을 그대로 돌려줍니다.
    이 경우 이후의 결과 매핑은 모두 건너뜁니다.
    """

    def __init__(self, es: Elasticsearch, factory: SearchRequestFactory | None = None):
        self.es = es
        self.factory = factory or SearchRequestFactory()

    def execute(self, query: SearchQuery, pagination: Pagination | None = None) -> SearchResultSet | Any:
        """검색 수행.

        Args:
            query: 검색 요청
            pagination: 페이지네이션 옵션 (None이면 백엔드 기본값)

        Returns:
            SearchResultSet, 또는 escalation callback의 반환값.

        Raises:
            MalformedResponse: 응답에 total 필드가 없는 경우.
        """
        body = self.factory.create(query, pagination)

        if query.escalation_callback is not None:
            logger.debug(f"escalation callback으로 검색 위임: {query.record_type.name}")
            return query.escalation_callback(self.es, body)

        index = query.index_name
        resp = self.es.search(index=index, body=body)
        result = SearchResultSet.from_response(resp)
        logger.debug(f"검색 완료 ({index}): {len(result)} hits / total {result.total_count}")
        return result
