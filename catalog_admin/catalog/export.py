"""CSV export of the filtered catalog.

Produces the payload and file name only; how the file reaches the user
is up to the export sink supplied by the host.
"""

import csv
import io
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date

import structlog

from catalog_admin.domain.exceptions import ExportError, NothingToExportError
from catalog_admin.domain.models import ProductRecord

logger = structlog.get_logger()

CSV_MIME_TYPE = "text/csv; charset=utf-8"
MISSING = "N/A"

EXPORT_COLUMNS: tuple[str, ...] = (
    "S.No",
    "Part Code",
    "Product Name",
    "Description",
    "Category",
    "Sub Category",
    "Price",
    "Stock",
    "Image URLs",
)


@dataclass(frozen=True)
class ExportPayload:
    """Generated export file.

    Attributes:
        content: CSV text.
        filename: Suggested file name.
        mime_type: Content type for the download.
        row_count: Number of data rows (header excluded).
    """

    content: str
    filename: str
    mime_type: str
    row_count: int

    @property
    def data(self) -> bytes:
        """CSV payload encoded as UTF-8."""
        return self.content.encode("utf-8")


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _text_or_missing(value: str | None) -> str:
    return value if value else MISSING


def export_filename(filtered: bool, export_date: date, date_format: str = "%d-%m-%Y") -> str:
    """Build the export file name.

    Args:
        filtered: Whether a search filter was active at export time.
        export_date: Date the export was produced.
        date_format: strftime pattern for the date part.

    Returns:
        ``Products_Export_Filtered_<date>.csv`` or ``Products_Export_All_<date>.csv``.
    """
    scope = "Filtered" if filtered else "All"
    return f"Products_Export_{scope}_{export_date.strftime(date_format)}.csv"


class CsvExporter:
    """Serializes a filtered product sequence to CSV.

    Example usage:
        exporter = CsvExporter(currency_symbol="₹")
        payload = exporter.export(filtered_products, filtered=True)
        sink.deliver(payload.data, payload.filename, payload.mime_type)
    """

    def __init__(
        self,
        currency_symbol: str = "₹",
        date_format: str = "%d-%m-%Y",
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize exporter.

        Args:
            currency_symbol: Prefix for the Price column.
            date_format: strftime pattern used in the file name.
            today: Clock returning the export date.
        """
        self.currency_symbol = currency_symbol
        self.date_format = date_format
        self.today = today

    def row(self, serial: int, record: ProductRecord) -> list[str]:
        """Get the export columns of one record.

        Args:
            serial: 1-based position within the export.
            record: Product to serialize.

        Returns:
            Column values in ``EXPORT_COLUMNS`` order.
        """
        price = MISSING
        if record.price is not None:
            price = f"{self.currency_symbol}{_format_number(record.price)}"
        stock = MISSING if record.stock is None else _format_number(record.stock)
        images = ", ".join(record.images) if record.images else MISSING
        return [
            str(serial),
            _text_or_missing(record.sku),
            _text_or_missing(record.name),
            _text_or_missing(record.description),
            _text_or_missing(record.category),
            _text_or_missing(record.sub_category),
            price,
            stock,
            images,
        ]

    def render(self, records: Sequence[ProductRecord]) -> str:
        """Render header and rows as CSV text.

        Every field is quoted and embedded quotes are doubled. Rows are
        joined with newlines, without a trailing newline.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(EXPORT_COLUMNS)
        for serial, record in enumerate(records, start=1):
            writer.writerow(self.row(serial, record))
        return buffer.getvalue().removesuffix("\n")

    def export(self, records: Sequence[ProductRecord], filtered: bool) -> ExportPayload:
        """Produce the export payload for the filtered sequence.

        Args:
            records: Currently filtered products.
            filtered: Whether a search filter is active.

        Returns:
            Export payload.

        Raises:
            NothingToExportError: If ``records`` is empty.
            ExportError: If the payload cannot be serialized.
        """
        if not records:
            raise NothingToExportError(filtered=filtered)

        try:
            content = self.render(records)
            filename = export_filename(filtered, self.today(), self.date_format)
        except (csv.Error, TypeError, ValueError) as e:
            logger.error("CSV export failed", error=str(e), rows=len(records))
            raise ExportError(f"Failed to export products: {e}") from e

        logger.info("CSV export generated", rows=len(records), filename=filename)
        return ExportPayload(
            content=content,
            filename=filename,
            mime_type=CSV_MIME_TYPE,
            row_count=len(records),
        )
