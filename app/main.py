from __future__ import annotations
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from .config import settings
from .http.client import HttpClient
from .http.scraper_api import ScraperApiClient
from .services.scraping_service import ScrapingService
from .api.routes import init_routes, router

http_client = HttpClient()

def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def build_app(http: HttpClient | None = None) -> FastAPI:
    _setup_logging()
    http = http or http_client

    api = ScraperApiClient(
        http=http,
        base_url=settings.API_BASE_URL,
        scrape_path=settings.SCRAPE_PATH,
    )
    service = ScrapingService(api=api)
    init_routes(service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with http.lifespan():
            yield

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.include_router(router, prefix="")
    return app

app = build_app()
