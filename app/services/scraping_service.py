from __future__ import annotations
import logging

from ..http.scraper_api import ScraperApiClient
from ..domain.models import (
    ExportDocument,
    ParsedElement,
    ScrapeOutcome,
    ScrapeRequest,
    ScrapeResponse,
    ScrapeView,
)
from .normalizer import RecordNormalizer, to_record
from .export import build_export

logger = logging.getLogger(__name__)

class ScrapingService:
    def __init__(
        self,
        api: ScraperApiClient,
        normalizer: RecordNormalizer | None = None,
    ) -> None:
        self.api = api
        self.normalizer = normalizer or RecordNormalizer()

    async def scrape(self, request: ScrapeRequest) -> ScrapeOutcome:
        return await self.api.scrape(request)

    def parse_response(self, response: ScrapeResponse) -> list[ParsedElement]:
        return self.normalizer.parse_many(response.data.elements)

    def build_view(self, response: ScrapeResponse) -> ScrapeView:
        items = self.parse_response(response)
        records = [to_record(p) for p in items]
        if response.data.count != len(items):
            # count viene del servicio; no se corrige, sólo se avisa
            logger.warning("normalize:count_mismatch count=%s elements=%s",
                           response.data.count, len(items))
        logger.info("normalize:done elements=%s", len(records))
        return ScrapeView(
            count=response.data.count,
            metadata=response.metadata,
            records=records,
            items=items,
        )

    def build_export(self, response: ScrapeResponse) -> ExportDocument:
        return build_export(response, self.normalizer)
