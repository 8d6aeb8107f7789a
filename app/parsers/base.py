from __future__ import annotations
from typing import Protocol
from ..domain.models import ScrapedElement, ParsedElement

class ElementParser(Protocol):
    """
    Interfaz para convertir un elemento crudo (text + html) en una fila legible.
    """
    def parse(self, element: ScrapedElement) -> ParsedElement: ...
