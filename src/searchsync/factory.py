"""
검색 엔진 팩토리.

설정으로부터 클라이언트와 엔진을 한 번에 생성합니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from elasticsearch import Elasticsearch

from .client import create_es_client
from .config import ESConfig
from .engine import ElasticSearchEngine
from .protocols import RecordStoreProtocol


@dataclass
class EngineComponents:
    """검색 엔진 관련 컴포넌트 묶음."""

    cfg: ESConfig
    es: Elasticsearch
    engine: ElasticSearchEngine


def create_engine(
    store: RecordStoreProtocol | None = None,
    config: ESConfig | None = None,
    es: Elasticsearch | None = None,
) -> EngineComponents:
    """
    검색 엔진 컴포넌트를 생성합니다.

    Args:
        store: lazy 매핑에 쓸 레코드 저장소 (없으면 lazy_map 사용 불가)
        config: ES 설정 (None이면 환경변수 기본값 사용)
        es: 이미 만들어진 클라이언트 (None이면 설정으로 생성)

    Returns:
        EngineComponents (cfg, es, engine)
    """
    cfg = config or ESConfig()
    client = es if es is not None else create_es_client(cfg)
    engine = ElasticSearchEngine(client, store=store, cfg=cfg)

    return EngineComponents(cfg=cfg, es=client, engine=engine)
