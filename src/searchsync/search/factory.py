"""SearchQuery를 ES search body로 변환."""

from __future__ import annotations

from typing import Any

from .types import Pagination, SearchQuery


class SearchRequestFactory:
    """query builder 객체 + 페이지네이션 옵션 -> ES search body.

    순수 변환이며 query/sort/from/size 외의 구조에는 관여하지 않습니다.
    """

    def create(self, query: SearchQuery, pagination: Pagination | None = None) -> dict[str, Any]:
        body: dict[str, Any] = {"query": query.filter_criteria or {"match_all": {}}}
        if query.sort:
            body["sort"] = list(query.sort)

        # 페이지네이션이 limit보다 우선
        if pagination is not None:
            body["from"] = pagination.offset
            body["size"] = pagination.per_page
        elif query.limit is not None:
            if query.limit < 0:
                raise ValueError(f"limit은 0 이상이어야 합니다: {query.limit}")
            body["size"] = query.limit

        return body

    def create_page(self, query: SearchQuery, page: int, per_page: int) -> dict[str, Any]:
        """page(1부터 시작), per_page로 body 생성."""
        return self.create(query, Pagination(page=page, per_page=per_page))
