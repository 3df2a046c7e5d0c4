"""
controller.py - Interaction controller
Single responsibility: turn UI events into repository/filter operations and
tell the view what changed.
"""
import logging

from tasker.database.repositories.tasks import TaskRepository
from tasker.domain.models import Task
from tasker.services.filter_service import FilterState, shows_new_tasks
from tasker.ui.edit_session import EditSession
from tasker.ui.view_model import build_view_model, remaining_count

logger = logging.getLogger(__name__)


class TaskController:
    """
    The view is optional: every view call is skipped when none is attached,
    so the controller can run headless.
    """

    def __init__(self, repo: TaskRepository, filter_state: FilterState, view=None):
        self.repo = repo
        self.filter_state = filter_state
        self.view = view
        self.edit_sessions: dict[str, EditSession] = {}

    def attach_view(self, view) -> None:
        self.view = view

    def start(self) -> None:
        migrated = self.repo.migrate_if_needed()
        if migrated:
            logger.info("Startup migration assigned ids to %d task(s)", migrated)
        self.render_all()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_all(self) -> None:
        # a full render rebuilds every row; open editors commit as on blur first
        for task_id in list(self.edit_sessions):
            value = self.view.editor_value(task_id) if self.view is not None else None
            self.finish_edit(task_id, value, save=True)
        if self.view is None:
            return
        self.view.render(build_view_model(self.repo.list(), self.filter_state.get()))

    def refresh_count(self) -> None:
        if self.view is None:
            return
        self.view.show_remaining(remaining_count(self.repo.list()))

    # ------------------------------------------------------------------
    # Task actions
    # ------------------------------------------------------------------

    def add_task(self, text: str | None) -> Task | None:
        task = self.repo.add(text or "")
        if task is None:
            return None
        if self.view is not None and shows_new_tasks(self.filter_state.get()):
            self.view.append_row(task)
        self.refresh_count()
        return task

    def toggle_task(self, task_id: str, currently_completed: bool) -> None:
        session = self.edit_sessions.get(task_id)
        if session and session.is_open:
            return
        completed = not currently_completed
        if self.view is not None:
            self.view.set_row_completed(task_id, completed)
        self.repo.set_completed(task_id, completed)
        self.refresh_count()

    def delete_task(self, task_id: str) -> None:
        self.repo.remove(task_id)
        self.edit_sessions.pop(task_id, None)
        if self.view is not None:
            self.view.remove_row(task_id)
        self.refresh_count()

    def change_filter(self, value: str) -> None:
        self.filter_state.set(value)
        self.render_all()

    def clear_completed(self) -> None:
        removed = self.repo.clear_completed()
        logger.debug("Cleared %d completed task(s)", removed)
        self.render_all()

    # ------------------------------------------------------------------
    # Inline edit
    # ------------------------------------------------------------------

    def begin_edit(self, task_id: str) -> bool:
        """Open an editor on the row. No-op if one is already open there."""
        session = self.edit_sessions.get(task_id)
        if session and session.is_open:
            return False
        task = self.repo.get(task_id)
        if task is None:
            return False
        self.edit_sessions[task_id] = EditSession(task_id, task.text)
        if self.view is not None:
            self.view.show_editor(task_id, task.text)
        return True

    def finish_edit(self, task_id: str, value: str | None, save: bool = True) -> str | None:
        """
        Close the row's editor and return the text the row now shows.
        Returns None when no editor was open (e.g. blur after Enter).
        """
        session = self.edit_sessions.pop(task_id, None)
        if session is None:
            return None
        result = session.finish(value, save)
        if result is None:
            return None
        text = result.text
        if result.saved:
            updated = self.repo.edit(task_id, text)
            if updated is None:
                text = session.original_text
        if self.view is not None:
            self.view.show_label(task_id, text)
        return text

    def cancel_edits(self) -> None:
        for task_id in list(self.edit_sessions):
            self.finish_edit(task_id, None, save=False)
