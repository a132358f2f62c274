"""Guarded product delete.

Two-step confirm/execute flow around the store's delete endpoint. The
workflow holds a single candidate slot; a new request while confirming
replaces the candidate, and nothing can be requested while the delete
call is in flight. On success the catalog is invalidated and fetched
again; it is never patched locally.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import structlog

from catalog_admin.application.notices import Notice, NoticeCode, Notifier
from catalog_admin.domain.exceptions import DeleteInProgressError, NoDeletePendingError
from catalog_admin.domain.models import ProductRecord
from catalog_admin.domain.state_machines import DeleteStatus, validate_delete_transition
from catalog_admin.infrastructure.store_client import (
    DELETE_FAILED_MESSAGE,
    TRANSPORT_ERROR_CODES,
    ProductStoreClient,
)

logger = structlog.get_logger()

DELETE_SUCCESS_MESSAGE = "Product deleted successfully."
DELETE_TRANSPORT_MESSAGE = "Error deleting product"


@dataclass(frozen=True)
class DeleteOutcome:
    """Result of a confirmed delete.

    Attributes:
        product_id: Product the delete call targeted.
        success: Whether the store accepted the delete.
        message: Message shown to the user.
    """

    product_id: str
    success: bool
    message: str


class DeleteWorkflow:
    """Confirm-then-delete state machine.

    Example usage:
        workflow = DeleteWorkflow(store, notifier, reload=controller.reload)
        workflow.request_delete(product)
        outcome = await workflow.confirm()
    """

    def __init__(
        self,
        store: ProductStoreClient,
        notifier: Notifier,
        reload: Callable[[], Awaitable[object]],
    ) -> None:
        """Initialize the workflow.

        Args:
            store: Product store client.
            notifier: Receives success and failure notices.
            reload: Invalidate-and-refetch command run after a successful delete.
        """
        self.store = store
        self.notifier = notifier
        self.reload = reload
        self.status = DeleteStatus.IDLE
        self.pending: ProductRecord | None = None

    @property
    def confirmation_prompt(self) -> str | None:
        """Question shown while a candidate awaits confirmation."""
        if self.pending is None:
            return None
        return f'Are you sure you want to delete the product "{self.pending.name}"?'

    def _transition(self, target: DeleteStatus) -> None:
        product_id = self.pending.id if self.pending is not None else "-"
        validate_delete_transition(product_id, self.status, target)
        self.status = target

    def request_delete(self, record: ProductRecord) -> None:
        """Propose a product for deletion, replacing any earlier candidate.

        Raises:
            DeleteInProgressError: If a delete call is in flight.
        """
        if self.status.is_busy():
            raise DeleteInProgressError(self.pending.id if self.pending else record.id)
        self._transition(DeleteStatus.CONFIRMING)
        if self.pending is not None and self.pending.id != record.id:
            logger.info("Delete candidate replaced", previous=self.pending.id, product_id=record.id)
        self.pending = record

    def cancel(self) -> None:
        """Discard the candidate without deleting anything.

        Raises:
            NoDeletePendingError: If nothing awaits confirmation.
            DeleteInProgressError: If the delete call is already in flight.
        """
        if self.status == DeleteStatus.IDLE:
            raise NoDeletePendingError()
        if self.status.is_busy():
            raise DeleteInProgressError(self.pending.id if self.pending else "-")
        self._transition(DeleteStatus.IDLE)
        self.pending = None

    async def confirm(self) -> DeleteOutcome:
        """Issue the delete call for the candidate.

        The candidate is cleared whatever the result. Failures are reported
        through the notifier and never retried.

        Returns:
            Outcome of the delete call.

        Raises:
            NoDeletePendingError: If nothing awaits confirmation.
            DeleteInProgressError: If the delete call is already in flight.
        """
        if self.status == DeleteStatus.IDLE or self.pending is None:
            raise NoDeletePendingError()
        if self.status.is_busy():
            raise DeleteInProgressError(self.pending.id)

        record = self.pending
        self._transition(DeleteStatus.DELETING)
        logger.info("Deleting product", product_id=record.id)
        try:
            response = await self.store.delete_product(record.id)
        finally:
            self._transition(DeleteStatus.IDLE)
            self.pending = None

        if not response.success:
            if response.error is None:
                message = DELETE_FAILED_MESSAGE
            elif response.error.error_code in TRANSPORT_ERROR_CODES:
                message = DELETE_TRANSPORT_MESSAGE
            else:
                message = response.error.message
            logger.warning("Product delete failed", product_id=record.id, message=message)
            self.notifier.notify(Notice.error(NoticeCode.DELETE_FAILED, message))
            return DeleteOutcome(product_id=record.id, success=False, message=message)

        self.notifier.notify(Notice.success(NoticeCode.DELETE_SUCCEEDED, DELETE_SUCCESS_MESSAGE))
        await self.reload()
        return DeleteOutcome(product_id=record.id, success=True, message=DELETE_SUCCESS_MESSAGE)
