"""Application layer - controller, delete workflow, session gate, notices."""

from catalog_admin.application.catalog_controller import CatalogController, CatalogRow, CatalogView
from catalog_admin.application.delete_workflow import DeleteOutcome, DeleteWorkflow
from catalog_admin.application.notices import Notice, NoticeCode, NoticeLevel, NoticeLog, Notifier
from catalog_admin.application.session import Session, require_session

__all__ = [
    "CatalogController",
    "CatalogRow",
    "CatalogView",
    "DeleteOutcome",
    "DeleteWorkflow",
    "Notice",
    "NoticeCode",
    "NoticeLevel",
    "NoticeLog",
    "Notifier",
    "Session",
    "require_session",
]
