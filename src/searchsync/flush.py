"""레코드 타입의 인덱스 비우기 (flush)."""

from __future__ import annotations

import logging

from elasticsearch import Elasticsearch

from .records import RecordType

logger = logging.getLogger(__name__)

MATCH_ALL: dict[str, dict] = {"match_all": {}}


class FlushCoordinator:
    """인덱스 존재 확인 -> 전체 삭제(delete_by_query) -> refresh.

    CHECK_EXISTS -> (없음: DONE) | (있음: DELETE_ALL -> REFRESH -> DONE)
    어느 단계든 실패하면 재시도 없이 그대로 전파됩니다.
    """

    def __init__(self, es: Elasticsearch):
        self.es = es

    def flush(self, record_type: RecordType) -> bool:
        """레코드 타입의 인덱스를 비움.

        Returns:
            문서를 삭제했으면 True, 인덱스가 없어 아무 것도 하지 않았으면 False.
        """
        index_name = record_type.index_name
        if not self.es.indices.exists(index=index_name):
            logger.info(f"Flush 생략: 인덱스 '{index_name}' 없음")
            return False

        resp = self.es.delete_by_query(index=index_name, query=MATCH_ALL)
        deleted = int((getattr(resp, "body", resp) or {}).get("deleted", 0))
        # 삭제 결과가 이후 검색에 즉시 보이도록
        self.es.indices.refresh(index=index_name)
        logger.info(f"Flush 완료 ({index_name}): {deleted}건 삭제")
        return True
