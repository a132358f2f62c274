"""State machines for the delete workflow.

Deterministic state machine that defines valid transitions for a
guarded product delete. The workflow holds at most one candidate at a
time and never issues more than one delete call concurrently.
"""

from enum import Enum

from catalog_admin.domain.exceptions import InvalidStateTransitionError


class DeleteStatus(str, Enum):
    """Delete workflow states.

    State diagram:
        IDLE ◄──────────────── cancel ────────────────┐
          │                                            │
          │ request_delete                             │
          ▼                                            │
        CONFIRMING ──── request_delete (replace) ──► CONFIRMING
          │
          │ confirm
          ▼
        DELETING ──── success / failure ──────────► IDLE
    """

    IDLE = "idle"
    CONFIRMING = "confirming"
    DELETING = "deleting"

    def can_transition_to(self, target: "DeleteStatus") -> bool:
        """Check if transition to target state is valid.

        Args:
            target: Target state to transition to.

        Returns:
            True if transition is valid.
        """
        return target in _DELETE_TRANSITIONS.get(self, set())

    def allowed_transitions(self) -> list["DeleteStatus"]:
        """Get list of valid target states.

        Returns:
            List of states that can be transitioned to.
        """
        return sorted(_DELETE_TRANSITIONS.get(self, set()), key=lambda s: s.value)

    def is_busy(self) -> bool:
        """Check if a delete call is in flight."""
        return self == DeleteStatus.DELETING


_DELETE_TRANSITIONS: dict[DeleteStatus, set[DeleteStatus]] = {
    DeleteStatus.IDLE: {DeleteStatus.CONFIRMING},
    # Confirming -> Confirming replaces the candidate
    DeleteStatus.CONFIRMING: {DeleteStatus.CONFIRMING, DeleteStatus.DELETING, DeleteStatus.IDLE},
    DeleteStatus.DELETING: {DeleteStatus.IDLE},
}


def validate_delete_transition(
    product_id: str,
    current_status: DeleteStatus,
    target_status: DeleteStatus,
) -> None:
    """Validate and raise if delete state transition is invalid.

    Args:
        product_id: Product identifier for error message.
        current_status: Current workflow status.
        target_status: Target workflow status.

    Raises:
        InvalidStateTransitionError: If transition is not valid.
    """
    if not current_status.can_transition_to(target_status):
        raise InvalidStateTransitionError(
            entity_type="Delete",
            entity_id=product_id,
            current_state=current_status.value,
            target_state=target_status.value,
            allowed_transitions=[s.value for s in current_status.allowed_transitions()],
        )
