"""bulk 응답 실패 분류.

응답 최상위 `errors` 플래그가 true이면 BulkSyncFailure를 발생시킵니다.
진단 정보로 전체 응답의 JSON 덤프와 실패 항목 목록을 함께 싣습니다.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from ..errors import BulkSyncFailure, DiagnosticSerializationFailure

logger = logging.getLogger(__name__)

FailedItem = tuple[str | None, int | None, Any]


def _as_dict(response: Any) -> Any:
    """ObjectApiResponse면 body를 꺼냄."""
    return getattr(response, "body", response)


def failed_items(response: Mapping[str, Any]) -> list[FailedItem]:
    """응답 items 중 error가 있는 항목의 (identity, status, error) 목록."""
    out: list[FailedItem] = []
    for item in response.get("items") or []:
        # item 형태: {"index": {"_id": ..., "status": ..., "error": {...}}}
        for result in item.values():
            if isinstance(result, Mapping) and result.get("error") is not None:
                out.append((result.get("_id"), result.get("status"), result["error"]))
    return out


def render_bulk_diagnostic(response: Any, operation: str = "index") -> str:
    """bulk 응답을 사람이 읽을 수 있는 JSON으로 직렬화.

    Raises:
        DiagnosticSerializationFailure: 응답을 직렬화할 수 없는 경우.
    """
    try:
        return json.dumps(_as_dict(response), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise DiagnosticSerializationFailure(operation) from e


def classify_bulk_response(response: Any, operation: str = "index") -> None:
    """bulk 응답 검사. 실패 항목이 있으면 예외 발생.

    Args:
        response: Elasticsearch bulk 응답 (dict 또는 ObjectApiResponse)
        operation: bulk 작업 종류 (오류 메시지용)

    Raises:
        BulkSyncFailure: errors 플래그가 true인 경우.
        DiagnosticSerializationFailure: 실패 응답을 직렬화할 수 없는 경우.
    """
    body = _as_dict(response)
    if not body.get("errors"):
        return

    diagnostic = render_bulk_diagnostic(body, operation)
    failed = failed_items(body)
    logger.error(f"Bulk {operation} 실패: {len(failed)}건")
    raise BulkSyncFailure(operation, diagnostic, failed)
