"""Result values returned by store operations instead of dialogs or raised errors"""

from dataclasses import dataclass
from typing import Any

from gistfolio.domain.enums import ActionStatus
from gistfolio.domain.exceptions import GistfolioException


@dataclass(frozen=True)
class ActionResult:
    """Outcome of an admin operation for the presentation layer to act on"""

    status: ActionStatus
    value: Any = None
    error: GistfolioException | None = None

    @property
    def ok(self) -> bool:
        return self.status == ActionStatus.OK

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    @classmethod
    def success(cls, value: Any = None) -> "ActionResult":
        return cls(status=ActionStatus.OK, value=value)

    @classmethod
    def failure(cls, status: ActionStatus, error: GistfolioException | None = None) -> "ActionResult":
        return cls(status=status, error=error)
