"""검색 결과 -> 저장소 레코드 스트림 (lazy 매핑).

hit ID를 chunk 단위로 저장소 커서에 요청하고, chunk 안에서 relevance 순서로 재정렬해 흘려보냅니다.
메모리에는 ID 위치 인덱스(O(#hits))와 chunk 하나 분량의 레코드만 올라갑니다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from ..errors import NotSupportedForAggregateType
from ..protocols import RecordStoreProtocol
from ..records import RecordType, SearchableRecord
from ..search.types import SearchResultSet

logger = logging.getLogger(__name__)


class LazyResultMapper:
    """hit 순서를 보존하는 단일 패스 레코드 이터레이터 생성기."""

    def __init__(self, store: RecordStoreProtocol, chunk_size: int = 1000):
        if chunk_size < 1:
            raise ValueError(f"chunk_size는 1 이상이어야 합니다: {chunk_size}")
        self.store = store
        self.chunk_size = chunk_size

    def map(self, record_type: RecordType, result_set: SearchResultSet) -> Iterator[SearchableRecord]:
        """hit 순서대로 레코드를 내보내는 이터레이터 반환.

        저장소에 없는 ID(삭제됨 등)는 건너뜁니다.

        Raises:
            NotSupportedForAggregateType: 집계 레코드 타입인 경우 (호출 즉시).
        """
        if record_type.is_aggregate:
            raise NotSupportedForAggregateType(record_type.name)

        if not result_set.hits:
            return iter(())

        return self._stream(record_type, result_set.identities)

    def _stream(self, record_type: RecordType, identities: Sequence[str]) -> Iterator[SearchableRecord]:
        # identity -> 위치 (중복 ID는 첫 위치)
        positions: dict[str, int] = {}
        for identity in identities:
            positions.setdefault(identity, len(positions))
        ordered = list(positions)

        for start in range(0, len(ordered), self.chunk_size):
            chunk = ordered[start : start + self.chunk_size]
            end = start + len(chunk)

            found: dict[int, SearchableRecord] = {}
            for record in self.store.cursor_by_identities(record_type, chunk):
                pos = positions.get(str(record.get_search_key()))
                if pos is None or not start <= pos < end:
                    logger.debug(f"검색 결과에 없는 레코드 제외: {record.get_search_key()}")
                    continue
                found.setdefault(pos, record)

            if len(found) < len(chunk):
                logger.debug(f"저장소에 없는 ID {len(chunk) - len(found)}건 제외 ({record_type.name})")

            for pos in sorted(found):
                yield found[pos]
