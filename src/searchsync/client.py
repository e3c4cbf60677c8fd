"""Elasticsearch 클라이언트 생성 및 연결 확인."""

from __future__ import annotations

import logging
from typing import Any

from elasticsearch import Elasticsearch

from .config import ESConfig

logger = logging.getLogger(__name__)


def create_es_client(cfg: ESConfig | None = None) -> Elasticsearch:
    """설정으로부터 동기화 엔진용 Elasticsearch 클라이언트 생성.

    재시도는 클라이언트(transport) 책임이며, 엔진은 재시도하지 않습니다.

    Args:
        cfg: ES 설정. None이면 환경변수 기반 기본 설정 사용.

    Returns:
        Elasticsearch 클라이언트 인스턴스.

    Raises:
        ValueError: ES_URL이 비어 있는 경우.
    """
    cfg = cfg or ESConfig()
    if not cfg.es_url:
        raise ValueError("ES_URL 환경변수를 설정하세요.")

    kwargs: dict[str, Any] = {
        "hosts": [cfg.es_url],
        "verify_certs": cfg.verify_certs,
        "request_timeout": cfg.request_timeout_s,
    }
    # Basic Auth는 사용자명/비밀번호가 모두 있을 때만
    if cfg.es_username and cfg.es_password:
        kwargs["basic_auth"] = (cfg.es_username, cfg.es_password)

    logger.debug(f"Elasticsearch 클라이언트 생성: {cfg.es_url}")
    return Elasticsearch(**kwargs)


def check_connection(es: Elasticsearch) -> bool:
    """ES 연결 상태 확인. 예외는 연결 실패로 간주."""
    try:
        return bool(es.ping())
    except Exception as e:
        logger.warning(f"Elasticsearch 연결 확인 실패: {e}")
        return False
