"""Catalog controller.

Owns the catalog snapshot and the screen state (query, page, loading,
pending delete) and derives every view from them on demand. Store I/O
happens only in ``load`` and in the delete workflow.
"""

from dataclasses import dataclass

import structlog

from catalog_admin.application.delete_workflow import DeleteOutcome, DeleteWorkflow
from catalog_admin.application.notices import Notice, NoticeCode, Notifier
from catalog_admin.application.session import Session, require_session
from catalog_admin.catalog.export import CsvExporter, ExportPayload
from catalog_admin.catalog.pagination import DEFAULT_PAGE_SIZE, Page, Paginator
from catalog_admin.catalog.state import CatalogState
from catalog_admin.domain.exceptions import NothingToExportError
from catalog_admin.domain.models import ProductRecord
from catalog_admin.domain.state_machines import DeleteStatus
from catalog_admin.infrastructure.export_sink import ExportSink
from catalog_admin.infrastructure.store_client import (
    FETCH_FAILED_MESSAGE,
    TRANSPORT_ERROR_CODES,
    ProductStoreClient,
)

logger = structlog.get_logger()

EXPORT_PREPARING_MESSAGE = "Preparing export..."
EXPORT_FAILED_MESSAGE = "Failed to export products"
NOTHING_TO_EXPORT_MESSAGE = "No products to export"
NO_MATCHES_MESSAGE = "No products found matching your search"
NO_PRODUCTS_MESSAGE = "No products available"


@dataclass(frozen=True)
class CatalogRow:
    """One table row of the visible page."""

    serial: int
    product: ProductRecord
    thumbnail: str


@dataclass(frozen=True)
class CatalogView:
    """Everything the rendering layer needs for one frame.

    Attributes:
        total_products: Size of the unfiltered catalog.
        filtered_count: Matches for the active search, None without one.
        categories: Facets over the unfiltered catalog.
        rows: Rows of the visible page; empty while loading.
        page: Current page.
        total_pages: Page count of the filtered sequence.
        show_pagination: Whether page controls are rendered.
        has_next: Whether "Next" is enabled.
        has_prev: Whether "Previous" is enabled.
        loading: Busy indicator instead of rows.
        empty_message: Text for an empty table, None otherwise.
        export_label: Caption of the export action.
        delete_prompt: Confirmation question, None when idle.
    """

    total_products: int
    filtered_count: int | None
    categories: list[str]
    rows: list[CatalogRow]
    page: int
    total_pages: int
    show_pagination: bool
    has_next: bool
    has_prev: bool
    loading: bool
    empty_message: str | None
    export_label: str
    delete_prompt: str | None


class CatalogController:
    """Orchestrates search, facets, pagination, export and delete.

    Example usage:
        session = require_session(current_session)
        controller = CatalogController(session, store, notifier, sink)
        await controller.load()
        controller.set_query("coil")
        view = controller.view()
        controller.export()
    """

    def __init__(
        self,
        session: Session,
        store: ProductStoreClient,
        notifier: Notifier,
        sink: ExportSink,
        paginator: Paginator | None = None,
        exporter: CsvExporter | None = None,
        placeholder_image: str = "/logo.png",
        catalogue_document: str = "/catalogue.pdf",
    ) -> None:
        """Initialize the controller.

        Args:
            session: Authenticated session; see ``require_session``.
            store: Product store client.
            notifier: Receives user-visible notices.
            sink: Delivers generated export files.
            paginator: Page slicer, 9 products per page by default.
            exporter: CSV exporter.
            placeholder_image: Thumbnail for products without images.
            catalogue_document: Locator of the static catalogue document.

        Raises:
            SessionRequiredError: If ``session`` is not authenticated.
        """
        self.session = require_session(session)
        self.store = store
        self.notifier = notifier
        self.sink = sink
        self.paginator = paginator or Paginator(DEFAULT_PAGE_SIZE)
        self.exporter = exporter or CsvExporter()
        self.placeholder_image = placeholder_image
        self.catalogue_document_url = catalogue_document
        self.state = CatalogState()
        self._refetch_requested = False
        self.deletes = DeleteWorkflow(store, notifier, reload=self.reload)

    # =========================================================================
    # State accessors
    # =========================================================================

    @property
    def catalog(self) -> tuple[ProductRecord, ...]:
        return self.state.catalog

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def page(self) -> int:
        return self.state.page

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def pending_delete(self) -> ProductRecord | None:
        return self.deletes.pending

    @property
    def delete_status(self) -> DeleteStatus:
        return self.deletes.status

    # =========================================================================
    # Fetch
    # =========================================================================

    async def load(self) -> bool:
        """Fetch the catalog and replace the snapshot.

        A fetch already in flight makes this a no-op. On failure the
        catalog is emptied and the store's message is shown. A ``reload``
        issued while this fetch is outstanding discards its result and
        fetches again before returning.

        Returns:
            True if a new snapshot was installed.
        """
        if self.state.loading:
            logger.debug("Catalog fetch already in flight")
            return False

        self.state = self.state.start_loading()
        while True:
            self._refetch_requested = False
            try:
                response = await self.store.list_products()
            except Exception as e:
                logger.error("Catalog fetch raised", error=str(e))
                self.state = self.state.load_failed()
                self.notifier.notify(Notice.error(NoticeCode.FETCH_FAILED, FETCH_FAILED_MESSAGE))
                raise
            if not self._refetch_requested:
                break
            logger.info("Discarding stale catalog fetch")

        if not response.success:
            error = response.error
            message = FETCH_FAILED_MESSAGE
            if error is not None and error.error_code not in TRANSPORT_ERROR_CODES:
                message = error.message
            logger.warning(
                "Catalog fetch failed",
                error_code=error.error_code if error else None,
                error=error.message if error else None,
            )
            self.state = self.state.load_failed()
            self.notifier.notify(Notice.error(NoticeCode.FETCH_FAILED, message))
            return False

        self.state = self.state.loaded(response.data, self.paginator)
        logger.info("Catalog loaded", count=len(self.state.catalog), page=self.state.page)
        return True

    async def reload(self) -> bool:
        """Discard the current snapshot and fetch a fresh one.

        While a fetch is outstanding the re-fetch is queued on it instead,
        so its stale result is never installed.
        """
        self.state = self.state.invalidated()
        if self.state.loading:
            self._refetch_requested = True
            logger.info("Re-fetch queued behind in-flight catalog fetch")
            return False
        return await self.load()

    # =========================================================================
    # Search and navigation
    # =========================================================================

    def set_query(self, query: str) -> None:
        """Change the search string; the page returns to 1."""
        self.state = self.state.with_query(query)

    def clear_search(self) -> None:
        self.set_query("")

    def select_category(self, category: str) -> None:
        """Search by a facet value."""
        self.set_query(category)

    def next_page(self) -> None:
        self.state = self.state.next_page(self.paginator)

    def previous_page(self) -> None:
        self.state = self.state.previous_page(self.paginator)

    def go_to_page(self, page: int) -> None:
        self.state = self.state.go_to_page(page, self.paginator)

    # =========================================================================
    # Derived views
    # =========================================================================

    def filtered(self) -> list[ProductRecord]:
        return self.state.filtered()

    def categories(self) -> list[str]:
        return self.state.categories()

    def total_pages(self) -> int:
        return self.state.total_pages(self.paginator)

    def visible_page(self) -> Page[ProductRecord]:
        return self.state.visible_page(self.paginator)

    def catalogue_document(self) -> str:
        """Locator of the pre-built catalogue document."""
        return self.catalogue_document_url

    def view(self) -> CatalogView:
        """Compute the full screen view from the current state."""
        state = self.state
        page = state.visible_page(self.paginator)
        rows: list[CatalogRow] = []
        if not state.loading:
            rows = [
                CatalogRow(
                    serial=page.serial(index),
                    product=product,
                    thumbnail=product.thumbnail(self.placeholder_image),
                )
                for index, product in enumerate(page.items)
            ]

        empty_message = None
        if not state.loading and not rows:
            empty_message = NO_MATCHES_MESSAGE if state.is_filtered else NO_PRODUCTS_MESSAGE

        return CatalogView(
            total_products=len(state.catalog),
            filtered_count=page.total if state.is_filtered else None,
            categories=state.categories(),
            rows=rows,
            page=state.page,
            total_pages=page.total_pages,
            show_pagination=page.show_controls,
            has_next=page.has_next,
            has_prev=page.has_prev,
            loading=state.loading,
            empty_message=empty_message,
            export_label="Export Filtered Products" if state.is_filtered else "Export All Products",
            delete_prompt=self.deletes.confirmation_prompt,
        )

    # =========================================================================
    # Export
    # =========================================================================

    def export(self) -> ExportPayload | None:
        """Export the filtered sequence through the sink.

        Returns:
            The delivered payload, or None if the export was aborted.
        """
        self.notifier.notify(Notice.info(NoticeCode.EXPORT_STARTED, EXPORT_PREPARING_MESSAGE))
        try:
            payload = self.exporter.export(self.state.filtered(), filtered=self.state.is_filtered)
            self.sink.deliver(payload.data, payload.filename, payload.mime_type)
        except NothingToExportError:
            logger.info("Export aborted, nothing to export", query=self.state.query)
            self.notifier.notify(Notice.error(NoticeCode.NOTHING_TO_EXPORT, NOTHING_TO_EXPORT_MESSAGE))
            return None
        except Exception as e:
            # Sinks are host-provided and may fail in any way
            logger.error("Export failed", error=str(e), error_type=type(e).__name__)
            self.notifier.notify(Notice.error(NoticeCode.EXPORT_FAILED, EXPORT_FAILED_MESSAGE))
            return None

        self.notifier.notify(
            Notice.success(
                NoticeCode.EXPORT_SUCCEEDED,
                f"Successfully exported {payload.row_count} products",
            )
        )
        return payload

    # =========================================================================
    # Delete
    # =========================================================================

    def request_delete(self, record: ProductRecord) -> None:
        self.deletes.request_delete(record)

    def cancel_delete(self) -> None:
        self.deletes.cancel()

    async def confirm_delete(self) -> DeleteOutcome:
        """Delete the pending candidate; a success triggers a full re-fetch."""
        return await self.deletes.confirm()
