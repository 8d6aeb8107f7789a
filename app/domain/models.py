from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from ..config import settings

# -------- Entrada (API de scraping) --------
class ScrapeRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    # mismos valores que precarga el formulario
    url: str = Field(default_factory=lambda: settings.DEFAULT_URL)
    selector: str = Field(default_factory=lambda: settings.DEFAULT_SELECTOR)

class ScrapedElement(BaseModel):
    """Un match del selector: texto plano y HTML del nodo."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    html: Optional[str] = None

class ScrapeMetadata(BaseModel):
    # Las claves llegan en camelCase desde la API
    model_config = ConfigDict(populate_by_name=True)

    method: str = ""
    execution_time: str = Field(default="", alias="executionTime")
    scraped_at: str = Field(default="", alias="scrapedAt")

class ScrapeData(BaseModel):
    elements: List[ScrapedElement] = Field(default_factory=list)
    count: int = 0

class ScrapeResponse(BaseModel):
    data: ScrapeData
    metadata: ScrapeMetadata = Field(default_factory=ScrapeMetadata)

class ScrapeOutcome(BaseModel):
    """Resultado explícito de la llamada a la API: éxito con respuesta o error con mensaje."""
    ok: bool
    response: Optional[ScrapeResponse] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, response: ScrapeResponse) -> "ScrapeOutcome":
        return cls(ok=True, response=response)

    @classmethod
    def failure(cls, error: str) -> "ScrapeOutcome":
        return cls(ok=False, error=error)

# -------- Intermedios del pipeline --------
class ReferenceSplit(BaseModel):
    referencia: str = ""
    contenido: str = ""

class PriceSplit(BaseModel):
    producto: str = ""
    precio_uno: str = ""
    precio_dos: str = ""

class ParsedElement(BaseModel):
    """Fila de despliegue: todo lo extraído de un elemento, aún como texto."""
    referencia: str = ""
    producto: str = ""
    precio_uno: str = ""
    precio_dos: str = ""
    imagen: str = ""

# -------- Salida --------
class NormalizedRecord(BaseModel):
    id: Optional[int] = None
    nombre: str = ""
    precio: Optional[float] = None
    imagen: str = ""

class ScrapeView(BaseModel):
    count: int
    metadata: ScrapeMetadata
    records: List[NormalizedRecord] = Field(default_factory=list)
    items: List[ParsedElement] = Field(default_factory=list)

class ExportDocument(BaseModel):
    scraping_results: List[NormalizedRecord] = Field(default_factory=list)
    metadata: ScrapeMetadata = Field(default_factory=ScrapeMetadata)
    total_items: int = 0
