import json
import math
import re
from typing import Any, Optional

from ..config import settings

def clean_text(text: str | None, marker: str | None = None) -> str:
    """Quita el marcador de ruido del sitio (literal, sensible a mayúsculas) y recorta."""
    if not text:
        return ""
    marker = settings.NOISE_MARKER if marker is None else marker
    # en bucle: "**Color No SeleccionableColor No Seleccionable" deja otro marcador al quitar el primero
    while marker and marker in text:
        text = text.replace(marker, "")
    return text.strip()

_PRICE_JUNK_RE = re.compile(r"[^0-9.,]")

def to_float_price(val: str | None) -> Optional[float]:
    """
    "$1,50 MXN" -> 1.5. Deja sólo dígitos, coma y punto; la primera coma pasa a punto.
    Si lo que queda no es un número válido (o desborda a inf) -> None.
    """
    if not val:
        return None
    s = _PRICE_JUNK_RE.sub("", val).replace(",", ".", 1)
    try:
        price = float(s)
    except ValueError:
        return None
    return price if math.isfinite(price) else None

_DIGITS_RE = re.compile(r"[0-9]+")

def coerce_int_id(val: str | None) -> Optional[int]:
    """Referencia "007" -> 7. Vacío, no numérico o demasiado largo para int() -> None."""
    if not val:
        return None
    s = val.strip()
    if not _DIGITS_RE.fullmatch(s):
        return None
    try:
        return int(s)
    except ValueError:
        # límite de dígitos de int() en Python 3.11+
        return None

_QUOTED_KEY_RE = re.compile(r'"(\w+)":', re.ASCII)

def dumps_unquoted(data: Any) -> str:
    """JSON indentado (2) con las claves sin comillas: {"id": 1} -> {id: 1}."""
    raw = json.dumps(data, indent=2, ensure_ascii=False)
    return _QUOTED_KEY_RE.sub(r"\1:", raw)

def join_nonempty(*parts: str | None, sep: str = " ") -> str:
    """Une las partes no vacías: ("Goma", "", "$3.00") -> "Goma $3.00"."""
    return sep.join(p for p in parts if p)
