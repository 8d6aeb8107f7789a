from __future__ import annotations
import re
from .base import ElementParser
from ..domain.models import ScrapedElement, ParsedElement, ReferenceSplit, PriceSplit
from ..utils.text import clean_text

# ====== PATRONES DEL BLOQUE vtex-product-summary ======
REF_RE = re.compile(r"Referencia:\s+([0-9]+)")
DECIMAL_RE = re.compile(r"[0-9]+\.[0-9]{2}")
IMG_TAG_RE = re.compile(r"<img\b[^>]*(?:>|$)", re.IGNORECASE)
SRC_ATTR_RE = re.compile(r"""(?<![\w-])src\s*=\s*(?:"([^"]*)"|'([^']*)')""", re.IGNORECASE)

def extract_reference(text: str) -> ReferenceSplit:
    """
    "Referencia: 123 Foo $10.00" -> referencia="123", contenido="Foo $10.00".
    Sólo cuenta el primer match; los demás quedan dentro del contenido.
    """
    m = REF_RE.search(text)
    if not m:
        return ReferenceSplit(referencia="", contenido=text.strip())
    contenido = (text[:m.start()] + text[m.end():]).strip()
    return ReferenceSplit(referencia=m.group(1), contenido=contenido)

def _trim_to_last_decimal(s: str) -> str:
    # Corta lo que sigue a la última cifra tipo 9.99 (badges, moneda, etc.)
    matches = list(DECIMAL_RE.finditer(s))
    if not matches:
        return s
    return s[:matches[-1].end()].strip()

def split_product_price(contenido: str) -> PriceSplit:
    """
    Separa nombre y hasta dos precios usando `$` como delimitador.
    El sitio concatena precio de lista y precio de oferta: "Cuaderno $19.99 $9.99 NUEVO".
    """
    i = contenido.find("$")
    if i == -1:
        return PriceSplit(producto=contenido.strip())

    producto = contenido[:i].strip()
    rest = contenido[i:].strip()
    j = rest.find("$", 1)  # rest[0] es el primer $
    if j == -1:
        return PriceSplit(producto=producto, precio_uno=rest)

    precio_uno = rest[:j].strip()
    precio_dos = _trim_to_last_decimal(rest[j:].strip())
    return PriceSplit(producto=producto, precio_uno=precio_uno, precio_dos=precio_dos)

def extract_img_url(html: str | None) -> str:
    """Valor del primer `src` del primer <img>, tal cual viene (sin decodificar)."""
    if not html:
        return ""
    tag = IMG_TAG_RE.search(html)
    if not tag:
        return ""
    src = SRC_ATTR_RE.search(tag.group(0))
    if not src:
        return ""
    return src.group(1) if src.group(1) is not None else src.group(2)


class VtexSummaryParser(ElementParser):
    """
    Responsabilidad: extraer referencia, producto, precios e imagen de un
    elemento `.vtex-product-summary-2-x-element` ya scrapeado.
    """
    def __init__(self, noise_marker: str | None = None) -> None:
        self.noise_marker = noise_marker

    def parse(self, element: ScrapedElement) -> ParsedElement:
        cleaned = clean_text(element.text, self.noise_marker)
        ref = extract_reference(cleaned)
        prices = split_product_price(ref.contenido)
        return ParsedElement(
            referencia=ref.referencia,
            producto=prices.producto,
            precio_uno=prices.precio_uno,
            precio_dos=prices.precio_dos,
            imagen=extract_img_url(element.html),
        )
