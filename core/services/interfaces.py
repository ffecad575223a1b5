"""Core service interfaces and shared data structures.

This module defines the dataclasses describing removal options and batch
outcomes, plus the narrow protocols the core expects from its collaborators
(panels, connectors, confirmation, error reporting and busy status).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from core.models import Category, ResourceItem

T = TypeVar("T")


class RemoveError(Exception):
    """Raised by a deletion connector when the engine refuses a removal."""


class RerenderError(Exception):
    """Raised by a panel that cannot draw itself."""


@dataclass(frozen=True)
class RemoveOptions:
    """Policy flags passed to a deletion connector.

    Attributes:
        force: Remove even if the resource has soft dependents.
        prune_children: Also remove dependents that cascade (images only).
    """

    force: bool = False
    prune_children: bool = False


@dataclass(frozen=True)
class MutationFailure:
    """A removal that the connector reported as failed."""

    category: Category
    name: str
    reason: str
    item_id: str = field(default="", compare=False)

    def report_line(self) -> str:
        return f"{self.name}: {self.reason}"


@dataclass
class BatchResult:
    """Outcome of one batch removal.

    Attributes:
        failures: Failed removals in processing order.
        removed: Items removed successfully, in processing order.
        skipped: (category, identifier) of selections that no longer resolved.
    """

    failures: list[MutationFailure] = field(default_factory=list)
    removed: list[ResourceItem] = field(default_factory=list)
    skipped: list[tuple[Category, str]] = field(default_factory=list)
    log_path: str | None = None

    @property
    def ok(self) -> bool:
        return not self.failures

    def report_text(self) -> str:
        """Aggregated user-facing report, one line per failure."""
        return "\n".join(f.report_line() for f in self.failures)


class PanelAdapter(Protocol):
    """What the core needs from one category's list panel."""

    def visible_items(self) -> Sequence[ResourceItem]:
        """Items currently shown, after any active filter."""
        ...

    def all_items(self) -> Sequence[ResourceItem]:
        """Every known item of the category, regardless of filter."""
        ...

    def focused_item(self) -> ResourceItem | None:
        """Item under the cursor, or None when the panel is empty."""
        ...

    def advance_focus(self) -> None:
        """Move the cursor to the next visible item."""
        ...

    def rerender(self) -> None:
        """Redraw the panel; raises `RerenderError` when drawing fails."""
        ...


class DeletionConnector(Protocol):
    """Performs the actual removal of one resource."""

    def remove(self, item: ResourceItem, options: RemoveOptions) -> None:
        """Remove `item`; raise on failure."""
        ...


class ConfirmationPrompt(Protocol):
    """Modal yes/no interaction."""

    def prompt(
        self,
        title: str,
        message: str,
        on_accept: Callable[[], object],
        on_decline: Callable[[], object] | None = None,
    ) -> None:
        """Ask the user and invoke the matching callback."""
        ...


class ErrorPanel(Protocol):
    """Surface for aggregated error text."""

    def show(self, message: str) -> None:
        """Present `message` to the user."""
        ...


class WaitingStatus(Protocol):
    """Busy indicator wrapped around long-running work."""

    def run(self, message: str, work: Callable[[], T]) -> T:
        """Run `work` while showing `message`; return its result."""
        ...
