import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from pydantic import ValidationError

from app.domain.models import NormalizedRecord, ParsedElement, ScrapedElement
from app.services.export import records_text
from app.services.normalizer import (
    RecordNormalizer,
    clipboard_text,
    normalize,
    normalize_many,
    parse_element,
)


class TestNormalize:
    def test_end_to_end(self):
        element = ScrapedElement(
            text="Referencia: 42 Notebook $5.50*Color No Seleccionable",
            html="<img src='img.png'>",
        )
        assert normalize(element) == NormalizedRecord(id=42, nombre="Notebook", precio=5.5, imagen="img.png")

    def test_without_reference_or_price(self):
        record = normalize(ScrapedElement(text="Solo nombre", html=None))
        assert record == NormalizedRecord(id=None, nombre="Solo nombre", precio=None, imagen="")

    def test_unparseable_price_is_none(self):
        record = normalize(ScrapedElement(text="Referencia: 9 Lapiz $ Agotado", html=""))
        assert record.id == 9
        assert record.nombre == "Lapiz"
        assert record.precio is None

    def test_comma_decimal(self):
        record = normalize(ScrapedElement(text="Goma $3,75"))
        assert record.precio == pytest.approx(3.75)

    def test_precio_uses_first_price_only(self):
        record = normalize(ScrapedElement(text="Shirt $19.99 $9.99 NEW"))
        assert record.precio == pytest.approx(19.99)

    @pytest.mark.parametrize("text", [
        "",
        "   ",
        "$",
        "$$$",
        "Referencia:",
        "Referencia: ",
        "*Color No Seleccionable",
        "Referencia: 1 $ $ $",
        " Referencia: 5 X",
    ])
    @pytest.mark.parametrize("html", [None, "", "<img", "<img src=>", "<img src=\"unterminated"])
    def test_total(self, text, html):
        record = normalize(ScrapedElement(text=text, html=html))
        assert isinstance(record, NormalizedRecord)
        assert isinstance(record.nombre, str)
        assert isinstance(record.imagen, str)

    def test_huge_reference_and_price_degrade(self):
        record = normalize(ScrapedElement(text="Referencia: " + "1" * 5000 + " X $" + "9" * 400))
        assert record.id is None
        assert record.nombre == "X"
        assert record.precio is None
        assert "Infinity" not in records_text([record])

    def test_pure(self):
        element = ScrapedElement(text="Referencia: 3 Caja $1.00 $0.90", html='<img src="c.jpg">')
        assert normalize(element) == normalize(element)

    def test_element_is_immutable(self):
        element = ScrapedElement(text="x")
        with pytest.raises(ValidationError):
            element.text = "y"


class TestNormalizeMany:
    def test_keeps_input_order(self):
        elements = [
            ScrapedElement(text=f"Referencia: {i} Item {i} ${i}.00") for i in range(1, 6)
        ]
        records = normalize_many(elements)
        assert [r.id for r in records] == [1, 2, 3, 4, 5]
        assert [r.nombre for r in records] == [f"Item {i}" for i in range(1, 6)]

    def test_empty(self):
        assert normalize_many([]) == []

    def test_custom_noise_marker(self):
        from app.parsers.vtex_summary import VtexSummaryParser

        normalizer = RecordNormalizer(VtexSummaryParser(noise_marker="AGOTADO"))
        record = normalizer.normalize(ScrapedElement(text="Pluma $8.00 AGOTADO"))
        assert record.precio == pytest.approx(8.0)


class TestClipboardText:
    def test_joins_non_empty_parts(self):
        parsed = parse_element(ScrapedElement(text="Shirt $19.99 $9.99 NEW"))
        assert clipboard_text(parsed) == "Shirt $19.99 $9.99"

    def test_omits_missing_prices(self):
        assert clipboard_text(ParsedElement(producto="Solo nombre")) == "Solo nombre"
        assert clipboard_text(ParsedElement(producto="Goma", precio_uno="$3.00")) == "Goma $3.00"
