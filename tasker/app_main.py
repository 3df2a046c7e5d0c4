"""
app_main.py - Tasker メインアプリケーション
Tasker v0.1
"""

import logging

import flet as ft

from tasker.config import APP_TITLE, COLOR_BG, COLOR_PRIMARY, DB_PATH
from tasker.database.kv_store import SqliteKeyValueStore
from tasker.database.repositories.tasks import TaskRepository
from tasker.database.task_storage import TaskStorage
from tasker.services.filter_service import FilterState
from tasker.ui.controller import TaskController
from tasker.ui.views import TaskListView

logger = logging.getLogger(__name__)


def build_controller(store) -> TaskController:
    storage = TaskStorage(store)
    return TaskController(TaskRepository(storage), FilterState(storage))


def _show_error(page: ft.Page, title: str, exc: Exception) -> None:
    page.overlay.append(
        ft.AlertDialog(
            title=ft.Text(title),
            content=ft.Text(f"Details: {exc}"),
            open=True,
        )
    )
    page.update()


# ==========================================================================
# メインアプリ
# ==========================================================================


def main(page: ft.Page):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.horizontal_alignment = ft.CrossAxisAlignment.CENTER
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    try:
        controller = build_controller(SqliteKeyValueStore(DB_PATH))
    except Exception as exc:
        logger.exception("Failed to open task storage")
        _show_error(page, "Storage initialization failed", exc)
        return

    view = TaskListView(page, controller)
    controller.attach_view(view)
    page.add(view.build())

    def on_keyboard(e: ft.KeyboardEvent):
        if e.key == "Escape":
            controller.cancel_edits()

    page.on_keyboard_event = on_keyboard

    try:
        controller.start()
    except Exception as exc:
        logger.exception("Error rendering task list")
        _show_error(page, "Could not load tasks", exc)


# ==========================================================================
# エントリーポイント
# ==========================================================================


if __name__ == "__main__":
    ft.run(main)
