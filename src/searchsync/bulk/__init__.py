"""Bulk sync layer: payload 생성과 응답 실패 분류."""

from .builder import BulkOperation, BulkOperationType, BulkRequestBuilder
from .classifier import classify_bulk_response, failed_items, render_bulk_diagnostic

__all__ = [
    "BulkOperation",
    "BulkOperationType",
    "BulkRequestBuilder",
    "classify_bulk_response",
    "failed_items",
    "render_bulk_diagnostic",
]
