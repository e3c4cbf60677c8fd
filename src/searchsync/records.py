"""레코드 관련 공용 타입.

이 모듈은 Elasticsearch에 의존하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class SearchableRecord(Protocol):
    """검색 인덱스에 동기화되는 레코드 인터페이스.

    ID와 인덱스명은 레코드만으로 결정되어야 합니다.

    Example:
        >>> @dataclass
        ... class Article:
        ...     id: int
        ...     title: str
        ...     def get_search_key(self) -> int:
        ...         return self.id
        ...     def searchable_as(self) -> str:
        ...         return "articles"
        ...     def to_search_document(self) -> dict[str, Any]:
        ...         return {"title": self.title}
    """

    def get_search_key(self) -> str | int: ...

    def searchable_as(self) -> str: ...

    def to_search_document(self) -> dict[str, Any]: ...


@dataclass(frozen=True)
class RecordType:
    """레코드 타입 기술자.

    Attributes:
        name: 타입 이름 (로그/오류 메시지용)
        index_name: 기본 대상 인덱스명
        is_aggregate: 여러 인덱스(테이블)를 묶은 합성 타입 여부
    """

    name: str
    index_name: str
    is_aggregate: bool = False

    @classmethod
    def aggregate(cls, name: str, *types: RecordType) -> RecordType:
        """여러 레코드 타입을 묶은 집계 타입 생성.

        인덱스명은 ES multi-target 문법(콤마 구분)으로 합쳐집니다.
        """
        if not types:
            raise ValueError("집계 타입에는 하나 이상의 레코드 타입이 필요합니다.")
        return cls(
            name=name,
            index_name=",".join(t.index_name for t in types),
            is_aggregate=True,
        )


@dataclass(frozen=True)
class RecordRef:
    """eager 매핑 결과의 자리표시자. 호출자가 나중에 레코드로 채웁니다."""

    identity: str
    index: str | None = None
    score: float | None = None
