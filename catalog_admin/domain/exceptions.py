"""Domain exceptions.

All catalog-level errors that represent rule violations. These are raised
by the state machines, the delete workflow and the exporter when an
operation cannot be performed in the current state.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions.

    All catalog errors inherit from this class so the application layer
    can catch them in one place and turn them into user-visible notices.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# State Machine Errors
# ============================================================================


class InvalidStateTransitionError(CatalogError):
    """Raised when an invalid state transition is attempted."""

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        current_state: str,
        target_state: str,
        allowed_transitions: list[str] | None = None,
    ) -> None:
        """Initialize invalid state transition error.

        Args:
            entity_type: Type of entity (e.g., "Delete").
            entity_id: ID of the entity.
            current_state: Current state of the entity.
            target_state: Attempted target state.
            allowed_transitions: List of allowed target states from current state.
        """
        allowed = allowed_transitions or []
        message = (
            f"Cannot transition {entity_type}({entity_id}) "
            f"from '{current_state}' to '{target_state}'. "
            f"Allowed transitions: {allowed}"
        )
        super().__init__(
            message,
            details={
                "entity_type": entity_type,
                "entity_id": entity_id,
                "current_state": current_state,
                "target_state": target_state,
                "allowed_transitions": allowed,
            },
        )


# ============================================================================
# Session Errors
# ============================================================================


class SessionRequiredError(CatalogError):
    """Raised when the catalog is opened without an authenticated session."""

    def __init__(self, redirect_to: str = "/") -> None:
        """Initialize session required error.

        Args:
            redirect_to: Location the host should send the user to.
        """
        super().__init__(
            "An authenticated session is required to manage products",
            details={"redirect_to": redirect_to},
        )
        self.redirect_to = redirect_to


# ============================================================================
# Delete Errors
# ============================================================================


class DeleteError(CatalogError):
    """Base class for delete workflow errors."""

    pass


class NoDeletePendingError(DeleteError):
    """Raised when confirming or cancelling with no candidate selected."""

    def __init__(self) -> None:
        super().__init__("No product is awaiting delete confirmation")


class DeleteInProgressError(DeleteError):
    """Raised when a delete call is already in flight."""

    def __init__(self, product_id: str) -> None:
        """Initialize delete in progress error.

        Args:
            product_id: ID of the product being deleted.
        """
        super().__init__(
            f"Product {product_id} is already being deleted",
            details={"product_id": product_id},
        )


# ============================================================================
# Export Errors
# ============================================================================


class ExportError(CatalogError):
    """Raised when the export payload cannot be produced."""

    pass


class NothingToExportError(ExportError):
    """Raised when the filtered sequence is empty."""

    def __init__(self, filtered: bool = False) -> None:
        """Initialize nothing to export error.

        Args:
            filtered: Whether a search filter was active.
        """
        super().__init__(
            "No products to export",
            details={"filtered": filtered},
        )
