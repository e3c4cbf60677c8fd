"""동기화/검색 엔진 예외 정의.

호출자는 예외 클래스로 실패 종류를 구분합니다.
잘못된 페이지 번호나 ID 누락 같은 호출 규약 위반은 ValueError로 즉시 실패합니다.
"""

from __future__ import annotations

from typing import Any


class SearchSyncError(Exception):
    """searchsync 예외 기본 클래스."""


class BulkSyncFailure(SearchSyncError):
    """bulk 요청 중 하나 이상의 항목이 실패.

    Attributes:
        operation: bulk 작업 종류 ("index" | "delete")
        diagnostic: 전체 응답의 JSON 덤프 (사람이 읽을 수 있는 형태)
        failed_items: (identity, status, error) 튜플 목록
    """

    def __init__(
        self,
        operation: str,
        diagnostic: str,
        failed_items: list[tuple[str | None, int | None, Any]],
    ):
        self.operation = operation
        self.diagnostic = diagnostic
        self.failed_items = failed_items
        failed_ids = ", ".join(str(identity) for identity, _, _ in failed_items)
        super().__init__(
            f"Bulk {operation} error: {len(failed_items)} item(s) failed [{failed_ids}]\n{diagnostic}"
        )


class DiagnosticSerializationFailure(SearchSyncError):
    """bulk 실패 응답을 진단용으로 직렬화하지 못함.

    원래 직렬화 오류는 __cause__로 연결됩니다.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Bulk {operation} error (응답 직렬화 실패)")


class MalformedResponse(SearchSyncError):
    """백엔드 응답에 필요한 필드가 없음."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"응답에 '{field}' 필드가 없습니다.")


class NotSupportedForAggregateType(SearchSyncError):
    """여러 인덱스를 묶은 집계 레코드 타입에는 lazy 매핑을 쓸 수 없음."""

    def __init__(self, record_type: str):
        self.record_type = record_type
        super().__init__(
            f"'{record_type}'는 집계 레코드 타입입니다. lazy 매핑 대신 map()을 사용하세요."
        )


class OperationNotSupported(SearchSyncError, NotImplementedError):
    """엔진이 의도적으로 지원하지 않는 관리 작업 (인덱스 생성/삭제 등)."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"'{operation}' is not implemented")
