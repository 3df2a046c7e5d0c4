"""
views.py - Task list view
Single responsibility: build the flet controls for the task list and project
view models onto them. Events are forwarded to the controller.
"""

import flet as ft

from tasker.config import (
    APP_TITLE,
    BORDER_RADIUS_BTN,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    CONTENT_WIDTH,
)
from tasker.domain.filters import DEFAULT_FILTER, FILTER_ACTIVE, FILTER_COMPLETED, FILTER_VALUES
from tasker.domain.models import Task
from tasker.ui.components.task_row import TaskRow
from tasker.ui.helpers import filter_label, format_remaining
from tasker.ui.view_model import ListViewModel

FILTER_ICONS = {
    FILTER_ACTIVE: ft.Icons.ADJUST,
    FILTER_COMPLETED: ft.Icons.CHECK_CIRCLE,
}


class TaskListView:
    def __init__(self, page: ft.Page | None, controller):
        self.page = page
        self.controller = controller
        self.rows: dict[str, TaskRow] = {}
        self.active_filter = DEFAULT_FILTER

        self.task_input = ft.TextField(
            hint_text="What needs to be done?",
            on_submit=self._on_add,
            autofocus=True,
            expand=True,
            border_radius=BORDER_RADIUS_BTN,
            border_color="transparent",
            bgcolor=COLOR_CARD,
            content_padding=ft.Padding.symmetric(horizontal=12, vertical=12),
            text_size=15,
        )
        self.add_button = ft.FilledButton(
            "Add",
            icon=ft.Icons.ADD,
            style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
            on_click=self._on_add,
        )
        self.list_column = ft.Column(spacing=0)
        self.remaining_text = ft.Text("", size=13, color=COLOR_TEXT_MUTED)
        self.filter_buttons: dict[str, ft.Container] = {
            value: self._build_filter_button(value) for value in FILTER_VALUES
        }
        self.clear_button = ft.TextButton(
            "Clear completed", on_click=lambda _e: self.controller.clear_completed()
        )

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def build(self) -> ft.Control:
        header = ft.Text(
            APP_TITLE, size=28, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN
        )
        footer = ft.Row(
            controls=[
                self.remaining_text,
                ft.Row(controls=list(self.filter_buttons.values()), spacing=0),
                self.clear_button,
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
        return ft.Container(
            content=ft.Column(
                controls=[
                    header,
                    ft.Row(controls=[self.task_input, self.add_button], spacing=8),
                    footer,
                    ft.Divider(height=1, color=COLOR_BORDER),
                    self.list_column,
                ],
                spacing=16,
                scroll=ft.ScrollMode.AUTO,
            ),
            width=CONTENT_WIDTH,
            padding=ft.Padding.all(24),
        )

    def _build_filter_button(self, value: str) -> ft.Container:
        btn = ft.Container(
            data=value,
            padding=ft.Padding.symmetric(vertical=8, horizontal=14),
            on_click=lambda _e: self.controller.change_filter(value),
            ink=True,
            border_radius=ft.BorderRadius.only(top_left=6, top_right=6),
        )
        self._style_filter_button(btn, value == self.active_filter)
        return btn

    def _style_filter_button(self, btn: ft.Container, selected: bool) -> None:
        color = COLOR_PRIMARY if selected else COLOR_TEXT_MUTED
        btn.content = ft.Row(
            [
                ft.Icon(FILTER_ICONS.get(btn.data, ft.Icons.LIST), color=color, size=16),
                ft.Text(
                    filter_label(btn.data),
                    color=color,
                    weight=ft.FontWeight.BOLD if selected else ft.FontWeight.NORMAL,
                ),
            ],
            spacing=6,
        )
        btn.border = ft.Border.only(
            bottom=ft.BorderSide(2, COLOR_PRIMARY if selected else "transparent")
        )

    def _make_row(self, task: Task) -> TaskRow:
        return TaskRow(
            task,
            on_toggle=self.controller.toggle_task,
            on_delete=self.controller.delete_task,
            on_begin_edit=self.controller.begin_edit,
            on_finish_edit=self.controller.finish_edit,
        )

    def _update(self) -> None:
        if self.page is not None:
            self.page.update()

    # ------------------------------------------------------------------
    # Renderer API used by the controller
    # ------------------------------------------------------------------

    def render(self, model: ListViewModel) -> None:
        self.rows = {task.id: self._make_row(task) for task in model.rows}
        self.list_column.controls = list(self.rows.values())
        self.remaining_text.value = format_remaining(model.remaining)
        self.active_filter = model.active_filter
        for value, btn in self.filter_buttons.items():
            self._style_filter_button(btn, value == model.active_filter)
        self._update()

    def append_row(self, task: Task) -> None:
        row = self._make_row(task)
        self.rows[task.id] = row
        self.list_column.controls.append(row)
        self._update()

    def remove_row(self, task_id: str) -> None:
        row = self.rows.pop(task_id, None)
        if row is None:
            return
        self.list_column.controls.remove(row)
        self._update()

    def set_row_completed(self, task_id: str, completed: bool) -> None:
        row = self.rows.get(task_id)
        if row is None:
            return
        row.set_completed(completed)
        self._update()

    def show_remaining(self, count: int) -> None:
        self.remaining_text.value = format_remaining(count)
        self._update()

    def show_editor(self, task_id: str, text: str) -> None:
        row = self.rows.get(task_id)
        if row is None:
            return
        row.show_editor(text)
        self._update()

    def editor_value(self, task_id: str) -> str | None:
        row = self.rows.get(task_id)
        if row is None or row.editor is None:
            return None
        return row.editor.value

    def show_label(self, task_id: str, text: str) -> None:
        row = self.rows.get(task_id)
        if row is None:
            return
        row.show_label(text)
        self._update()

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def _on_add(self, _e=None):
        task = self.controller.add_task(self.task_input.value)
        if task is None:
            return
        self.task_input.value = ""
        self._update()
