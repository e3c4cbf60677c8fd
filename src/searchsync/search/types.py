"""검색 요청/응답 공용 타입.

이 모듈은 Elasticsearch 클라이언트에 의존하지 않습니다.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..errors import MalformedResponse
from ..records import RecordType


@dataclass(frozen=True)
class Pagination:
    """1부터 시작하는 페이지네이션 옵션."""

    page: int
    per_page: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page는 1 이상이어야 합니다: {self.page}")
        if self.per_page < 1:
            raise ValueError(f"per_page는 1 이상이어야 합니다: {self.per_page}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass
class SearchQuery:
    """검색 요청 (query builder 객체).

    Attributes:
        record_type: 대상 레코드 타입
        filter_criteria: ES 쿼리 절 (외부에서 생성, None이면 match_all)
        sort: 정렬 절 목록
        limit: 페이지네이션 없는 검색의 결과 수
        index: 인덱스명 override (record_type 기본 인덱스보다 우선)
        escalation_callback: (client, body) -> Any. 있으면 매핑 없이 결과 그대로 반환
        result_transform: (source) -> record. eager 매핑 시 hit 변환 함수
    """

    record_type: RecordType
    filter_criteria: dict[str, Any] | None = None
    sort: list[Any] | None = None
    limit: int | None = None
    index: str | None = None
    escalation_callback: Callable[[Any, dict[str, Any]], Any] | None = None
    result_transform: Callable[[dict[str, Any]], Any] | None = None

    @property
    def index_name(self) -> str:
        return self.index or self.record_type.index_name


@dataclass(frozen=True)
class Hit:
    """검색 결과 히트."""

    identity: str
    score: float | None
    index: str | None = None
    source: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_es(cls, h: Mapping[str, Any]) -> Hit:
        if "_id" not in h:
            raise MalformedResponse("hits.hits[]._id")
        return cls(
            identity=str(h["_id"]),
            score=h.get("_score"),
            index=h.get("_index"),
            source=dict(h.get("_source") or {}),
        )


def extract_total_count(response: Mapping[str, Any]) -> int:
    """응답에서 hits.total.value 추출.

    track_total_hits 이전 형식(정수 total)도 허용합니다.

    Raises:
        MalformedResponse: total 필드가 없는 경우.
    """
    hits = response.get("hits")
    if not isinstance(hits, Mapping) or "total" not in hits:
        raise MalformedResponse("hits.total.value")

    total = hits["total"]
    if isinstance(total, Mapping):
        if "value" not in total:
            raise MalformedResponse("hits.total.value")
        return int(total["value"])
    if isinstance(total, int):
        return total
    raise MalformedResponse("hits.total.value")


@dataclass(frozen=True)
class SearchResultSet:
    """검색 응답. hits 순서는 인덱스가 매긴 relevance 순서입니다."""

    hits: tuple[Hit, ...]
    total_count: int
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> SearchResultSet:
        """ES search 응답(dict 또는 ObjectApiResponse)을 파싱."""
        raw = dict(getattr(response, "body", response))
        total = extract_total_count(raw)
        hits = raw["hits"].get("hits") or []
        return cls(hits=tuple(Hit.from_es(h) for h in hits), total_count=total, raw=raw)

    @property
    def identities(self) -> list[str]:
        return [h.identity for h in self.hits]

    def __len__(self) -> int:
        return len(self.hits)
