from __future__ import annotations
from typing import Iterable, List
import logging

from ..domain.models import ScrapedElement, ParsedElement, NormalizedRecord
from ..parsers.base import ElementParser
from ..parsers.vtex_summary import VtexSummaryParser
from ..utils.text import coerce_int_id, to_float_price, join_nonempty

logger = logging.getLogger(__name__)

def to_record(parsed: ParsedElement) -> NormalizedRecord:
    return NormalizedRecord(
        id=coerce_int_id(parsed.referencia),
        nombre=parsed.producto,
        precio=to_float_price(parsed.precio_uno),
        imagen=parsed.imagen,
    )

def clipboard_text(parsed: ParsedElement) -> str:
    """Texto de una sola fila: "producto precio_uno precio_dos" sin partes vacías."""
    return join_nonempty(parsed.producto, parsed.precio_uno, parsed.precio_dos)


class RecordNormalizer:
    """
    Responsabilidad: elemento crudo -> NormalizedRecord, uno a uno y sin estado.
    Nunca lanza: lo que no se encuentra queda en None o "".
    """
    def __init__(self, parser: ElementParser | None = None) -> None:
        self.parser = parser or VtexSummaryParser()

    def parse_element(self, element: ScrapedElement) -> ParsedElement:
        return self.parser.parse(element)

    def normalize(self, element: ScrapedElement) -> NormalizedRecord:
        return to_record(self.parse_element(element))

    def parse_many(self, elements: Iterable[ScrapedElement]) -> List[ParsedElement]:
        return [self.parse_element(el) for el in elements]

    def normalize_many(self, elements: Iterable[ScrapedElement]) -> List[NormalizedRecord]:
        records = [to_record(p) for p in self.parse_many(elements)]
        logger.debug(
            "normalize: records=%s with_id=%s with_price=%s",
            len(records),
            sum(1 for r in records if r.id is not None),
            sum(1 for r in records if r.precio is not None),
        )
        return records


_default = RecordNormalizer()

def parse_element(element: ScrapedElement) -> ParsedElement:
    return _default.parse_element(element)

def normalize(element: ScrapedElement) -> NormalizedRecord:
    return _default.normalize(element)

def normalize_many(elements: Iterable[ScrapedElement]) -> List[NormalizedRecord]:
    return _default.normalize_many(elements)
