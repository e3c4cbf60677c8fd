"""searchsync 관리 CLI.

Usage:
    searchsync status articles users
    searchsync flush articles --confirm
    searchsync search articles --query '{"match": {"title": "elastic"}}' --page 2 --per-page 10

환경변수:
    ES_URL: Elasticsearch URL
    ES_USERNAME: Basic Auth 사용자명 (선택)
    ES_PASSWORD: Basic Auth 비밀번호 (선택)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from elasticsearch import Elasticsearch

from .client import check_connection, create_es_client
from .config import ESConfig
from .engine import ElasticSearchEngine
from .protocols import SearchEngineProtocol
from .records import RecordType
from .search import SearchQuery


def cmd_status(es: Elasticsearch, indices: list[str]) -> int:
    """인덱스 존재 여부와 문서 수 출력."""
    print("\n📊 Elasticsearch Index Status")
    print("=" * 50)

    for name in indices:
        exists = bool(es.indices.exists(index=name))
        emoji = "✅" if exists else "❌"
        print(f"\n{emoji} {name}")
        if exists:
            count = int(es.count(index=name)["count"])
            print(f"   Documents: {count:,}")

    print()
    return 0


def cmd_flush(engine: SearchEngineProtocol, index: str, confirm: bool) -> int:
    """인덱스의 모든 문서 삭제."""
    if not confirm:
        print("\n⚠️  --confirm 플래그를 추가해야 삭제됩니다.")
        print("   이 작업은 인덱스의 모든 문서를 삭제합니다!")
        return 1

    print(f"\n🗑️  Flushing {index}...")
    flushed = engine.flush(RecordType(name=index, index_name=index))
    if not flushed:
        print(f"   인덱스 '{index}'가 없습니다. (변경 없음)")
    print("\n✨ Done!")
    return 0


def cmd_search(
    engine: SearchEngineProtocol,
    index: str,
    query_json: str | None,
    page: int | None,
    per_page: int,
) -> int:
    """검색 결과의 total과 hit ID를 순서대로 출력."""
    try:
        criteria = json.loads(query_json) if query_json else None
    except json.JSONDecodeError as e:
        print(f"\n❌ --query JSON 파싱 실패: {e}")
        return 1

    query = SearchQuery(record_type=RecordType(name=index, index_name=index), filter_criteria=criteria)
    if page is None:
        results = engine.search(query)
    else:
        results = engine.search_page(query, page=page, per_page=per_page)

    print(f"\n🔎 Total: {engine.get_total_count(results):,}")
    for rank, hit in enumerate(results.hits, start=1):
        print(f"   {rank:>3}. {hit.identity}  (score={hit.score})")
    print()
    return 0


def main(argv: list[str] | None = None, es: Elasticsearch | None = None) -> int:
    """CLI 진입점."""
    parser = argparse.ArgumentParser(
        description="Elasticsearch 검색 인덱스 관리 도구",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
환경변수:
  ES_URL             Elasticsearch URL
  ES_USERNAME        Basic Auth 사용자명
  ES_PASSWORD        Basic Auth 비밀번호
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG 로그 출력")
    subparsers = parser.add_subparsers(dest="command", help="명령어")

    status_parser = subparsers.add_parser("status", help="인덱스 상태 확인")
    status_parser.add_argument("indices", nargs="+", help="인덱스명")

    flush_parser = subparsers.add_parser("flush", help="인덱스 문서 전체 삭제")
    flush_parser.add_argument("index", help="인덱스명")
    flush_parser.add_argument("--confirm", action="store_true", help="삭제 확인 (필수)")

    search_parser = subparsers.add_parser("search", help="검색")
    search_parser.add_argument("index", help="인덱스명")
    search_parser.add_argument("--query", dest="query_json", help="ES 쿼리 절 (JSON)")
    search_parser.add_argument("--page", type=int, help="페이지 (1부터)")
    search_parser.add_argument("--per-page", type=int, default=10, help="페이지당 결과 수")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cfg = ESConfig()
    if es is None:
        try:
            es = create_es_client(cfg)
        except Exception as e:
            print(f"\n❌ Elasticsearch 연결 오류: {e}")
            return 1
        if not check_connection(es):
            print(f"\n❌ Elasticsearch 연결 실패: {cfg.es_url}")
            return 1
        print(f"\n🔗 Connected to: {cfg.es_url}")

    engine = ElasticSearchEngine(es, cfg=cfg)

    if args.command == "status":
        return cmd_status(es, args.indices)
    elif args.command == "flush":
        return cmd_flush(engine, args.index, args.confirm)
    elif args.command == "search":
        return cmd_search(engine, args.index, args.query_json, args.page, args.per_page)

    return 1


if __name__ == "__main__":
    sys.exit(main())
