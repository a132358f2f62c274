"""User-visible notices.

Every failure of a catalog operation ends in a notice the host shows to
the user. Log output is supplementary only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import structlog

logger = structlog.get_logger()


class NoticeLevel(str, Enum):
    """Notice severity."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class NoticeCode(str, Enum):
    """Machine-readable notice identifiers."""

    FETCH_FAILED = "fetch_failed"
    DELETE_SUCCEEDED = "delete_succeeded"
    DELETE_FAILED = "delete_failed"
    EXPORT_STARTED = "export_started"
    EXPORT_SUCCEEDED = "export_succeeded"
    NOTHING_TO_EXPORT = "nothing_to_export"
    EXPORT_FAILED = "export_failed"


@dataclass(frozen=True)
class Notice:
    """A message for the user.

    Attributes:
        level: Severity.
        code: Notice identifier.
        message: Text shown to the user.
    """

    level: NoticeLevel
    code: NoticeCode
    message: str

    @classmethod
    def info(cls, code: NoticeCode, message: str) -> "Notice":
        return cls(level=NoticeLevel.INFO, code=code, message=message)

    @classmethod
    def success(cls, code: NoticeCode, message: str) -> "Notice":
        return cls(level=NoticeLevel.SUCCESS, code=code, message=message)

    @classmethod
    def error(cls, code: NoticeCode, message: str) -> "Notice":
        return cls(level=NoticeLevel.ERROR, code=code, message=message)


class Notifier(Protocol):
    """Host capability that shows notices to the user."""

    def notify(self, notice: Notice) -> None:
        ...


class NoticeLog:
    """In-memory notifier that keeps notices in arrival order."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def notify(self, notice: Notice) -> None:
        logger.debug("Notice", level=notice.level.value, code=notice.code.value, message=notice.message)
        self.notices.append(notice)

    @property
    def last(self) -> Notice | None:
        return self.notices[-1] if self.notices else None

    def messages(self) -> list[str]:
        return [notice.message for notice in self.notices]

    def codes(self) -> list[NoticeCode]:
        return [notice.code for notice in self.notices]

    def clear(self) -> None:
        self.notices.clear()
