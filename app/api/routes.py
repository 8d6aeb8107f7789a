from __future__ import annotations
from fastapi import APIRouter, HTTPException, Depends, Response
from fastapi.responses import PlainTextResponse
from ..domain.models import ScrapeRequest, ScrapeResponse, ScrapeView
from ..services.scraping_service import ScrapingService
from ..services.normalizer import clipboard_text
from ..services.export import export_text, export_filename, records_text

router = APIRouter()
service: ScrapingService | None = None

def init_routes(scraping_service: ScrapingService) -> APIRouter:
    global service
    service = scraping_service
    return router

def get_service() -> ScrapingService:
    if service is None:
        raise HTTPException(500, "Service not initialized")
    return service

async def _scrape_or_502(body: ScrapeRequest, service: ScrapingService) -> ScrapeResponse:
    outcome = await service.scrape(body)
    if not outcome.ok or outcome.response is None:
        raise HTTPException(502, outcome.error or "Error al conectar con la API")
    return outcome.response

def _download(text: str) -> Response:
    return Response(
        content=text,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )

@router.get("/health")
async def health():
    return {"ok": True}

# -------- Scraping + normalización --------
@router.post("/scrape", response_model=ScrapeView, response_model_by_alias=True)
async def run_scrape(body: ScrapeRequest, service: ScrapingService = Depends(get_service)):
    response = await _scrape_or_502(body, service)
    return service.build_view(response)

@router.post("/scrape/export")
async def scrape_export(body: ScrapeRequest, service: ScrapingService = Depends(get_service)):
    response = await _scrape_or_502(body, service)
    return _download(export_text(service.build_export(response)))

@router.post("/scrape/clipboard", response_class=PlainTextResponse)
async def scrape_clipboard(body: ScrapeRequest, service: ScrapingService = Depends(get_service)):
    response = await _scrape_or_502(body, service)
    return records_text(service.build_view(response).records)

# -------- Sólo normalización (payload ya scrapeado) --------
@router.post("/normalize", response_model=ScrapeView, response_model_by_alias=True)
async def normalize_payload(body: ScrapeResponse, service: ScrapingService = Depends(get_service)):
    return service.build_view(body)

@router.post("/normalize/export")
async def normalize_export(body: ScrapeResponse, service: ScrapingService = Depends(get_service)):
    return _download(export_text(service.build_export(body)))

@router.post("/normalize/clipboard/{index}", response_class=PlainTextResponse)
async def normalize_clipboard_item(index: int, body: ScrapeResponse, service: ScrapingService = Depends(get_service)):
    items = service.parse_response(body)
    if index < 0 or index >= len(items):
        raise HTTPException(404, f"Elemento {index} fuera de rango (total={len(items)})")
    return clipboard_text(items[index])
