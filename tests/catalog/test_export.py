"""Tests for CSV export."""

import csv
import io
from datetime import date
from unittest.mock import patch

import pytest

from catalog_admin.catalog.export import (
    CSV_MIME_TYPE,
    EXPORT_COLUMNS,
    CsvExporter,
    export_filename,
)
from catalog_admin.domain.exceptions import ExportError, NothingToExportError
from tests.conftest import make_catalog, make_product


@pytest.fixture
def exporter() -> CsvExporter:
    return CsvExporter(currency_symbol="₹", today=lambda: date(2024, 3, 5))


def parse(content: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(content)))


class TestExportFilename:
    """Tests for export_filename."""

    def test_all_products(self) -> None:
        assert export_filename(False, date(2024, 3, 5)) == "Products_Export_All_05-03-2024.csv"

    def test_filtered_products(self) -> None:
        assert export_filename(True, date(2024, 3, 5)) == "Products_Export_Filtered_05-03-2024.csv"

    def test_custom_date_format(self) -> None:
        assert export_filename(False, date(2024, 3, 5), "%Y-%m-%d") == "Products_Export_All_2024-03-05.csv"


class TestCsvExporter:
    """Tests for CsvExporter."""

    def test_header_and_row_count(self, exporter: CsvExporter) -> None:
        payload = exporter.export(make_catalog(4), filtered=False)
        rows = parse(payload.content)

        assert rows[0] == list(EXPORT_COLUMNS)
        assert len(rows) == 5
        assert payload.row_count == 4

    def test_serial_numbers_are_sequential(self, exporter: CsvExporter) -> None:
        rows = parse(exporter.export(make_catalog(12), filtered=False).content)
        assert [row[0] for row in rows[1:]] == [str(i) for i in range(1, 13)]

    def test_full_row(self, exporter: CsvExporter) -> None:
        record = make_product(
            "a",
            sku="PC-1",
            name="Ignition Coil",
            description="High voltage",
            category="Electrical",
            subCategory="Ignition",
            price=250,
            stock=12,
            images=["https://cdn/a.png", "https://cdn/b.png"],
        )
        rows = parse(exporter.export([record], filtered=True).content)
        assert rows[1] == [
            "1",
            "PC-1",
            "Ignition Coil",
            "High voltage",
            "Electrical",
            "Ignition",
            "₹250",
            "12",
            "https://cdn/a.png, https://cdn/b.png",
        ]

    def test_missing_fields_become_na(self, exporter: CsvExporter) -> None:
        rows = parse(exporter.export([make_product("a", images=[])], filtered=False).content)
        assert rows[1][1] == "N/A"
        assert rows[1][4:] == ["N/A"] * 5

    def test_zero_price_and_stock_are_kept(self, exporter: CsvExporter) -> None:
        rows = parse(exporter.export([make_product("a", price=0, stock=0)], filtered=False).content)
        assert rows[1][6] == "₹0"
        assert rows[1][7] == "0"

    def test_whole_float_price_has_no_decimal_suffix(self, exporter: CsvExporter) -> None:
        rows = parse(exporter.export([make_product("a", price=99.0, stock=3.5)], filtered=False).content)
        assert rows[1][6] == "₹99"
        assert rows[1][7] == "3.5"

    def test_every_field_is_quoted_and_quotes_escaped(self, exporter: CsvExporter) -> None:
        record = make_product("a", name='3/4" hose', description="a,b")
        content = exporter.export([record], filtered=False).content
        lines = content.split("\n")

        assert lines[0].startswith('"S.No","Part Code"')
        assert '"3/4"" hose"' in lines[1]
        assert '"a,b"' in lines[1]
        assert parse(content)[1][2] == '3/4" hose'

    def test_rows_are_newline_joined_without_trailing_newline(self, exporter: CsvExporter) -> None:
        content = exporter.export(make_catalog(2), filtered=False).content
        assert not content.endswith("\n")
        assert len(content.split("\n")) == 3

    def test_payload_metadata(self, exporter: CsvExporter) -> None:
        payload = exporter.export(make_catalog(1), filtered=True)
        assert payload.mime_type == CSV_MIME_TYPE == "text/csv; charset=utf-8"
        assert payload.filename == "Products_Export_Filtered_05-03-2024.csv"
        assert payload.data == payload.content.encode("utf-8")

    def test_empty_sequence_aborts(self, exporter: CsvExporter) -> None:
        with pytest.raises(NothingToExportError) as exc_info:
            exporter.export([], filtered=True)
        assert exc_info.value.details == {"filtered": True}

    def test_serialization_failure_raises_export_error(self, exporter: CsvExporter) -> None:
        with patch.object(exporter, "render", side_effect=csv.Error("boom")):
            with pytest.raises(ExportError):
                exporter.export(make_catalog(1), filtered=False)
