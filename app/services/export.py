from __future__ import annotations
import time
from typing import Sequence

from ..config import settings
from ..domain.models import ExportDocument, NormalizedRecord, ScrapeResponse
from ..utils.text import dumps_unquoted
from .normalizer import RecordNormalizer, normalize_many

def build_export(response: ScrapeResponse, normalizer: RecordNormalizer | None = None) -> ExportDocument:
    records = (normalizer.normalize_many(response.data.elements) if normalizer
               else normalize_many(response.data.elements))
    return ExportDocument(
        scraping_results=records,
        metadata=response.metadata,
        total_items=response.data.count,
    )

def export_text(doc: ExportDocument) -> str:
    # metadata sale con sus claves originales (executionTime, scrapedAt)
    return dumps_unquoted(doc.model_dump(by_alias=True))

def records_text(records: Sequence[NormalizedRecord]) -> str:
    return dumps_unquoted([r.model_dump() for r in records])

def export_filename(now_ms: int | None = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{settings.EXPORT_PREFIX}-{now_ms}.json"
