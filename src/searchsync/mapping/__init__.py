"""Result mapping layer: 검색 hit -> 레코드 참조/레코드."""

from .eager import ResultMapper, map_ids
from .lazy import LazyResultMapper

__all__ = [
    "ResultMapper",
    "LazyResultMapper",
    "map_ids",
]
