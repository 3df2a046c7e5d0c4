import flet as ft

from tasker.config import (
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_DANGER,
    COLOR_PRIMARY,
)
from tasker.domain.models import Task
from tasker.ui.helpers import status_color, text_color


class TaskRow(ft.Container):
    """
    One task in the list. Tap toggles, double tap edits, the delete button
    removes. The label slot holds either the text or the inline editor.
    Callbacks receive the task id; the row never touches storage itself.
    """

    def __init__(
        self,
        task: Task,
        on_toggle,
        on_delete,
        on_begin_edit,
        on_finish_edit,
    ):
        super().__init__()
        self.task_id = task.id
        self.text = task.text
        self.completed = task.completed
        self.on_toggle = on_toggle
        self.on_delete = on_delete
        self.on_begin_edit = on_begin_edit
        self.on_finish_edit = on_finish_edit
        self.editor: ft.TextField | None = None

        self.data = task.id
        self.padding = ft.Padding.symmetric(horizontal=16, vertical=6)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.margin = ft.Margin.only(bottom=8)

        self.status_slot = ft.Container(width=24)
        self.label_slot = ft.Container(expand=True)
        self.delete_button = ft.IconButton(
            icon=ft.Icons.CLOSE,
            icon_color=COLOR_DANGER,
            icon_size=18,
            tooltip="Delete",
            on_click=self._handle_delete,
        )
        self.content = ft.GestureDetector(
            content=ft.Row(
                controls=[self.status_slot, self.label_slot, self.delete_button],
                spacing=12,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            on_tap=self._handle_tap,
            on_double_tap=self._handle_double_tap,
            mouse_cursor=ft.MouseCursor.CLICK,
        )
        self.set_completed(self.completed)
        self.show_label(self.text)

    @property
    def is_editing(self) -> bool:
        return self.editor is not None

    # ------------------------------------------------------------------
    # State projection (caller is responsible for page.update())
    # ------------------------------------------------------------------

    def set_completed(self, completed: bool) -> None:
        self.completed = completed
        self.status_slot.content = ft.Icon(
            ft.Icons.CHECK_CIRCLE if completed else ft.Icons.RADIO_BUTTON_UNCHECKED,
            size=22,
            color=status_color(completed),
        )
        if not self.is_editing:
            self.label_slot.content = self._build_label()

    def show_label(self, text: str) -> None:
        self.text = text
        self.editor = None
        self.label_slot.content = self._build_label()

    def show_editor(self, text: str) -> None:
        field = ft.TextField(
            value=text,
            autofocus=True,
            selection=ft.TextSelection(base_offset=0, extent_offset=len(text)),
            dense=True,
            border_color=COLOR_BORDER,
            focused_border_color=COLOR_PRIMARY,
            border_radius=BORDER_RADIUS_BTN,
            content_padding=ft.Padding.symmetric(horizontal=10, vertical=8),
        )
        field.on_submit = lambda _e: self.on_finish_edit(self.task_id, field.value, True)
        field.on_blur = lambda _e: self.on_finish_edit(self.task_id, field.value, True)
        self.editor = field
        self.label_slot.content = field

    def _build_label(self) -> ft.Text:
        return ft.Text(
            self.text,
            size=15,
            color=text_color(self.completed),
            style=ft.TextStyle(
                decoration=ft.TextDecoration.LINE_THROUGH if self.completed else None
            ),
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _handle_tap(self, _e):
        if self.is_editing:
            return
        self.on_toggle(self.task_id, self.completed)

    def _handle_double_tap(self, _e):
        self.on_begin_edit(self.task_id)

    def _handle_delete(self, _e):
        self.on_delete(self.task_id)
