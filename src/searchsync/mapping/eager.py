"""검색 결과 -> 메모리 내 순서 있는 컬렉션 (eager 매핑)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..records import RecordRef
from ..search.types import SearchResultSet


def map_ids(result_set: SearchResultSet) -> list[str]:
    """hit ID 목록을 relevance 순서대로 반환."""
    return result_set.identities


class ResultMapper:
    """hit마다 변환 함수 결과 또는 RecordRef 자리표시자를 만들어 hit 순서대로 반환.

    저장소에서 레코드를 채우는(hydration) 일은 하지 않습니다.
    """

    def map(
        self,
        result_set: SearchResultSet,
        transform: Callable[[dict[str, Any]], Any] | None = None,
    ) -> list[Any]:
        if transform is not None:
            return [transform(h.source) for h in result_set.hits]
        return [RecordRef(identity=h.identity, index=h.index, score=h.score) for h in result_set.hits]
