"""레코드 컬렉션 -> bulk 요청 payload 변환."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal

from ..records import SearchableRecord

BulkOperationType = Literal["index", "delete"]

_OPERATIONS: tuple[str, ...] = ("index", "delete")


@dataclass(frozen=True)
class BulkOperation:
    """bulk 요청의 단일 작업 (index 또는 delete)."""

    op_type: BulkOperationType
    record: SearchableRecord

    def __post_init__(self) -> None:
        if self.op_type not in _OPERATIONS:
            raise ValueError(f"알 수 없는 bulk 작업: {self.op_type!r}")

    @property
    def identity(self) -> str:
        key = self.record.get_search_key()
        if key is None or key == "":
            raise ValueError(f"검색 키가 없는 레코드는 동기화할 수 없습니다: {self.record!r}")
        return str(key)

    def to_lines(self) -> list[dict[str, Any]]:
        """control 라인 (+ index면 document 라인)."""
        control = {self.op_type: {"_index": self.record.searchable_as(), "_id": self.identity}}
        if self.op_type == "delete":
            return [control]
        return [control, self.record.to_search_document()]


class BulkRequestBuilder:
    """레코드 목록을 Elasticsearch bulk `operations` 인자로 변환.

    레코드마다 인덱스명을 따로 싣기 때문에 서로 다른 인덱스의 레코드를 한 배치에 섞을 수 있습니다.
    부수효과가 없는 순수 변환입니다.
    """

    def build(
        self, records: Iterable[SearchableRecord], operation: BulkOperationType
    ) -> list[dict[str, Any]]:
        # 검색 키 누락 시 부분 payload 없이 즉시 실패
        payload: list[dict[str, Any]] = []
        for record in records:
            payload.extend(BulkOperation(operation, record).to_lines())
        return payload

    def index(self, records: Iterable[SearchableRecord]) -> list[dict[str, Any]]:
        return self.build(records, "index")

    def delete(self, records: Iterable[SearchableRecord]) -> list[dict[str, Any]]:
        return self.build(records, "delete")
