from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from app.viewmodels.main_vm import MainVM
from app.views.list_panel import ListPanel
from app.views.main_window import MainWindow
from core.models import CATEGORY_ORDER
from infrastructure.console import (
    ConsoleConfirmation,
    ConsoleErrorPanel,
    ConsoleWaitingStatus,
    make_console,
)
from infrastructure.inventory_repository import InventoryConnector, JsonInventoryRepository
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings

BASE_DIR = Path(__file__).parent


def _inventory_path(settings: JsonSettings, argv: list[str]) -> Path:
    # CLI argument wins over settings; relative settings paths are beside main.py
    if len(argv) > 1:
        return Path(argv[1])
    raw = settings.get("inventory.path", "samples/inventory.json")
    path = Path(str(raw))
    return path if path.is_absolute() else BASE_DIR / path


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    settings = JsonSettings(BASE_DIR / "settings.json")
    init_logging(settings.get("logging.dir"), level=str(settings.get("logging.level", "INFO")))

    inventory_path = _inventory_path(settings, argv)
    if not inventory_path.exists():
        print(f"Inventory not found: {inventory_path}", file=sys.stderr)
        return 1

    repo = JsonInventoryRepository()
    inventory = repo.load(inventory_path)

    console = make_console()
    panels = {c: ListPanel(c, console) for c in CATEGORY_ORDER}
    vm = MainVM(
        inventory,
        panels,
        connector=InventoryConnector(inventory),
        confirmation=ConsoleConfirmation(console),
        error_panel=ConsoleErrorPanel(console),
        waiting=ConsoleWaitingStatus(console),
        settings=settings,
    )

    win = MainWindow(vm, console)
    code = win.run()

    if settings.get("inventory.save_on_exit", False):
        repo.save(inventory_path, inventory)
        logger.info("Inventory saved: {}", inventory_path)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
