"""Batch removal of the current selection.

Builds the confirmation text, hands a command object to the confirmation
collaborator, and on acceptance removes every selected resource in category
order. Failures are collected, never raised, and the selection is always
cleared when the batch ends.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial

from loguru import logger

from core.models import Category
from core.services.interfaces import (
    BatchResult,
    ConfirmationPrompt,
    ErrorPanel,
    MutationFailure,
    WaitingStatus,
)
from core.services.lookup import CategoryBinding
from core.services.selection_service import SelectionSnapshot, SelectionStore

CONFIRM_TITLE = "Confirm"
CONFIRM_DELETE_SELECTED = "Are you sure you want to delete all selected items?"
REMOVING_STATUS = "Removing..."
SUMMARY_SEPARATOR = ", "


def build_confirmation_summary(counts: Mapping[Category, int]) -> str:
    """Render nonzero counts as e.g. "2 container(s), 1 network(s)".

    `counts` is expected in category order, as returned by the store.
    """
    return SUMMARY_SEPARATOR.join(f"{n} {c.label}(s)" for c, n in counts.items() if n > 0)


def build_confirmation_message(counts: Mapping[Category, int]) -> str:
    return f"{CONFIRM_DELETE_SELECTED}\n\n{build_confirmation_summary(counts)}"


@dataclass(frozen=True)
class DeleteSelectedCommand:
    """A pending "delete selected" action awaiting confirmation."""

    snapshot: SelectionSnapshot
    title: str
    message: str


class BatchMutationOrchestrator:
    """Coordinates confirmation and execution of batch removals."""

    def __init__(
        self,
        store: SelectionStore,
        bindings: Mapping[Category, CategoryBinding],
        confirmation: ConfirmationPrompt | None = None,
        error_panel: ErrorPanel | None = None,
        waiting: WaitingStatus | None = None,
        on_finished: Callable[[BatchResult], None] | None = None,
        confirm: bool = True,
    ) -> None:
        """Create an orchestrator.

        Args:
            store: Selection state; cleared after every batch.
            bindings: Panel, connector and options per category.
            confirmation: Yes/no prompt; required when `confirm` is True.
            error_panel: Receives the aggregated failure report.
            waiting: Busy indicator wrapped around the batch.
            on_finished: Called with the result after each accepted batch.
            confirm: When False, accepted immediately without prompting.
        """
        if confirm and confirmation is None:
            raise ValueError("A confirmation prompt is required when confirm=True")
        self._store = store
        self._bindings = bindings
        self._confirmation = confirmation
        self._error_panel = error_panel
        self._waiting = waiting
        self._on_finished = on_finished
        self._confirm = confirm

    def prepare(self) -> DeleteSelectedCommand | None:
        """Snapshot the selection into a command, or None if nothing is selected."""
        if not self._store.has_any_selection():
            return None
        snapshot = self._store.snapshot()
        return DeleteSelectedCommand(
            snapshot=snapshot,
            title=CONFIRM_TITLE,
            message=build_confirmation_message(snapshot.counts()),
        )

    def request_delete_selected(self) -> DeleteSelectedCommand | None:
        """Ask for confirmation to delete the current selection.

        Returns:
            The pending command, or None when nothing is selected.
        """
        command = self.prepare()
        if command is None:
            logger.debug("Delete selected requested with empty selection")
            return None

        if not self._confirm:
            self.accept(command)
            return command

        assert self._confirmation is not None
        self._confirmation.prompt(
            command.title,
            command.message,
            partial(self.accept, command),
            partial(self.decline, command),
        )
        return command

    def decline(self, command: DeleteSelectedCommand) -> None:
        logger.info("Batch delete declined ({} items)", command.snapshot.total)

    def accept(self, command: DeleteSelectedCommand) -> BatchResult:
        """Run the confirmed batch and report failures."""
        work = partial(self.execute_batch, command.snapshot)
        result = self._waiting.run(REMOVING_STATUS, work) if self._waiting else work()

        try:
            if result.failures and self._error_panel is not None:
                self._error_panel.show(result.report_text())
        finally:
            if self._on_finished is not None:
                self._on_finished(result)
        return result

    def execute_batch(
        self,
        snapshot: SelectionSnapshot,
        bindings: Mapping[Category, CategoryBinding] | None = None,
    ) -> BatchResult:
        """Remove every item in `snapshot`, category by category.

        Items that no longer exist are skipped. A failed removal is recorded
        and the batch carries on. The live selection is cleared afterwards no
        matter how the batch went.

        Args:
            snapshot: Selection captured when the batch was requested.
            bindings: Overrides the orchestrator's bindings for this call.

        Returns:
            The batch result; `failures` is in processing order.
        """
        bindings = bindings if bindings is not None else self._bindings
        result = BatchResult()
        logger.info("Batch delete started: {} items", snapshot.total)
        try:
            for category, item_ids in snapshot:
                if not item_ids:
                    continue
                binding = bindings[category]
                for item_id in item_ids:
                    self._remove_one(binding, item_id, result)
        finally:
            self._store.clear_all()

        logger.info(
            "Batch delete finished: {} removed, {} failed, {} skipped",
            len(result.removed),
            len(result.failures),
            len(result.skipped),
        )
        return result

    def _remove_one(self, binding: CategoryBinding, item_id: str, result: BatchResult) -> None:
        category = binding.category
        item = binding.resolve(item_id)
        if item is None:
            # Already gone; nothing left to remove
            logger.debug("Skip {} {}: no longer exists", category.label, item_id)
            result.skipped.append((category, item_id))
            return

        try:
            binding.connector.remove(item, binding.options)
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.warning("Remove {} {} failed: {}", category.label, item.name, ex)
            result.failures.append(
                MutationFailure(category, item.name, str(ex), item_id=item.item_id)
            )
            return
        result.removed.append(item)
