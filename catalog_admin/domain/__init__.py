"""Domain layer - product model, delete state machine, exceptions.

Example usage:
    from catalog_admin.domain import ProductRecord, DeleteStatus

    record = ProductRecord.model_validate({"_id": "p-1", "name": "Coil", "description": "Copper coil"})
    assert DeleteStatus.IDLE.can_transition_to(DeleteStatus.CONFIRMING)
"""

from catalog_admin.domain.exceptions import (
    CatalogError,
    DeleteError,
    DeleteInProgressError,
    ExportError,
    InvalidStateTransitionError,
    NoDeletePendingError,
    NothingToExportError,
    SessionRequiredError,
)
from catalog_admin.domain.models import ProductRecord
from catalog_admin.domain.state_machines import DeleteStatus, validate_delete_transition

__all__ = [
    # Model
    "ProductRecord",
    # State machines
    "DeleteStatus",
    "validate_delete_transition",
    # Exceptions
    "CatalogError",
    "DeleteError",
    "DeleteInProgressError",
    "ExportError",
    "InvalidStateTransitionError",
    "NoDeletePendingError",
    "NothingToExportError",
    "SessionRequiredError",
]
