"""Elasticsearch 동기화 엔진 설정 관리.

환경변수(.env 포함)로 설정을 관리합니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class ESConfig:
    """Elasticsearch 연결 및 동기화 설정.

    Attributes:
        es_url: Elasticsearch 서버 URL (예: http://localhost:9200)
        es_username: HTTP Basic Auth 사용자명 (선택)
        es_password: HTTP Basic Auth 비밀번호 (선택)
        verify_certs: SSL 인증서 검증 여부
        request_timeout_s: 요청 타임아웃 (초)
        refresh_on_write: bulk 쓰기 후 refresh 대기 여부 (기본값)
        verify_deletes: bulk delete 응답도 실패 검사할지 여부
        lazy_chunk_size: lazy 매핑 시 한 번에 저장소에 요청할 ID 수
    """

    # Connection
    es_url: str = field(default_factory=lambda: os.environ["ES_URL"])
    es_username: str | None = field(default_factory=lambda: os.getenv("ES_USERNAME"))
    es_password: str | None = field(default_factory=lambda: os.getenv("ES_PASSWORD"))

    verify_certs: bool = field(default_factory=lambda: _env_bool("ES_VERIFY_CERTS", "true"))
    request_timeout_s: int = field(
        default_factory=lambda: int(os.getenv("ES_REQUEST_TIMEOUT_S", "30"))
    )

    # Sync
    refresh_on_write: bool = field(
        default_factory=lambda: _env_bool("ES_REFRESH_ON_WRITE", "false")
    )
    verify_deletes: bool = field(default_factory=lambda: _env_bool("ES_VERIFY_DELETES", "true"))

    # Lazy mapping
    lazy_chunk_size: int = field(
        default_factory=lambda: int(os.getenv("ES_LAZY_CHUNK_SIZE", "1000"))
    )

    def __post_init__(self) -> None:
        if self.lazy_chunk_size < 1:
            raise ValueError(f"lazy_chunk_size는 1 이상이어야 합니다: {self.lazy_chunk_size}")

    def refresh_param(self, refresh: bool | None = None) -> str | bool:
        """bulk 요청에 넘길 refresh 파라미터 반환."""
        if refresh is None:
            refresh = self.refresh_on_write
        return "wait_for" if refresh else False
