from __future__ import annotations
import logging
import httpx
from pydantic import ValidationError

from .client import HttpClient
from ..domain.models import ScrapeOutcome, ScrapeRequest, ScrapeResponse

logger = logging.getLogger(__name__)

CONNECT_ERROR = "Error al conectar con la API"
INVALID_PAYLOAD_ERROR = "Respuesta inválida de la API de scraping"

class ScraperApiClient:
    """
    Cliente de la API de scraping: POST {url, selector} -> elementos crudos.
    No lanza: cualquier fallo vuelve como ScrapeOutcome.failure(mensaje).
    """
    def __init__(self, http: HttpClient, base_url: str, scrape_path: str = "/scrape") -> None:
        self.http = http
        self.base_url = base_url.rstrip("/")
        self.scrape_path = "/" + scrape_path.lstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{self.scrape_path}"

    async def scrape(self, request: ScrapeRequest) -> ScrapeOutcome:
        logger.info("scrape:start url=%s selector=%s", request.url, request.selector)
        try:
            payload = await self.http.post_json(self.endpoint, request.model_dump())
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("scrape:http_error status=%s endpoint=%s", status, self.endpoint)
            return ScrapeOutcome.failure(f"Error {status}: {e.response.reason_phrase}")
        except ValueError:
            # JSONDecodeError o UnicodeDecodeError al leer el cuerpo
            logger.warning("scrape:bad_json endpoint=%s", self.endpoint)
            return ScrapeOutcome.failure(INVALID_PAYLOAD_ERROR)
        except httpx.HTTPError as e:
            logger.warning("scrape:connect_error endpoint=%s err=%r", self.endpoint, e)
            return ScrapeOutcome.failure(CONNECT_ERROR)

        try:
            response = ScrapeResponse.model_validate(payload)
        except ValidationError as e:
            logger.warning("scrape:invalid_payload errors=%s", e.error_count())
            return ScrapeOutcome.failure(INVALID_PAYLOAD_ERROR)

        logger.info("scrape:done count=%s elements=%s time=%s",
                    response.data.count, len(response.data.elements), response.metadata.execution_time)
        return ScrapeOutcome.success(response)
