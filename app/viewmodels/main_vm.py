"""ViewModel wiring selection, panels and batch removal for every category."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from app.views.list_panel import ListPanel
from core.models import CATEGORY_ORDER, Category
from core.services.delete_service import (
    BatchMutationOrchestrator,
    DeleteSelectedCommand,
    build_confirmation_summary,
)
from core.services.interfaces import (
    BatchResult,
    ConfirmationPrompt,
    DeletionConnector,
    ErrorPanel,
    WaitingStatus,
)
from core.services.lookup import CategoryBinding
from core.services.selection_controller import SelectionController
from core.services.selection_service import SelectionStore
from infrastructure.delete_log import write_delete_log
from infrastructure.inventory_repository import Inventory
from infrastructure.logging import find_latest_delete_log_file
from infrastructure.settings import JsonSettings, remove_options_for


class MainVM:
    """Main application view-model.

    Owns the selection store and builds one binding per category, so the
    toggle/select-all/delete handlers are written once for all categories.
    """

    def __init__(
        self,
        inventory: Inventory,
        panels: dict[Category, ListPanel],
        connector: DeletionConnector,
        confirmation: ConfirmationPrompt,
        error_panel: ErrorPanel,
        waiting: WaitingStatus | None = None,
        settings: JsonSettings | None = None,
        categories: Iterable[Category] = CATEGORY_ORDER,
    ) -> None:
        """Create a MainVM.

        Args:
            inventory: Source of the items listed by each panel.
            panels: One list panel per category.
            connector: Removes resources from the inventory.
            confirmation: Prompt used before a batch delete.
            error_panel: Receives the aggregated failure report.
            waiting: Busy indicator shown while removing.
            settings: Optional settings for removal policy and audit logs.
            categories: Categories to manage, in deletion order.
        """
        self.inventory = inventory
        self.panels = panels
        self.settings = settings
        self.store = SelectionStore(categories)

        self.bindings: dict[Category, CategoryBinding] = {
            c: CategoryBinding(
                category=c,
                panel=panels[c],
                connector=connector,
                options=remove_options_for(settings, c),
            )
            for c in self.store.categories
        }
        self.controller = SelectionController(self.store, panels)
        for panel in panels.values():
            panel.is_selected = self.controller.is_selected

        self.orchestrator = BatchMutationOrchestrator(
            self.store,
            self.bindings,
            confirmation=confirmation,
            error_panel=error_panel,
            waiting=waiting,
            on_finished=self._on_batch_finished,
            confirm=bool(settings.get("delete.confirm", True)) if settings else True,
        )
        self.last_result: BatchResult | None = None
        self.reload_panels()

    def reload_panels(self) -> None:
        for category in self.store.categories:
            self.panels[category].set_items(self.inventory.items(category))

    def handle_toggle(self, category: Category) -> bool | None:
        return self.controller.toggle(category)

    def handle_select_all(self, category: Category) -> int:
        return self.controller.select_all_visible(category)

    def handle_deselect_all(self, category: Category) -> None:
        self.controller.deselect_all(category)

    def handle_delete_selected(self) -> DeleteSelectedCommand | None:
        """Global "delete selected": confirm, then remove across all categories."""
        if not self.controller.has_any_selection():
            return None
        self.last_result = None
        return self.orchestrator.request_delete_selected()

    @property
    def delete_log_dir(self) -> str | None:
        return self.settings.get("delete.log_dir") if self.settings else None

    def latest_delete_log(self) -> str | None:
        """Path of the newest audit log, from this session or an earlier one."""
        path = find_latest_delete_log_file(self.delete_log_dir)
        return str(path) if path is not None else None

    def _on_batch_finished(self, result: BatchResult) -> None:
        self.last_result = result
        write_delete_log(result, self.delete_log_dir)
        logger.info(
            "Delete selected done: {} removed, {} failed",
            len(result.removed),
            len(result.failures),
        )
        self.reload_panels()
        self.controller.rerender_all()

    @property
    def selection_summary(self) -> str:
        counts = self.controller.per_category_counts()
        if not counts:
            return "Nothing selected"
        return build_confirmation_summary(counts)
