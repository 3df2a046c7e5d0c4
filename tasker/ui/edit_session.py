"""
edit_session.py - Inline edit state machine
Single responsibility: track one row's Viewing -> Editing -> Viewing cycle.
"""
from dataclasses import dataclass

VIEWING = "viewing"
EDITING = "editing"


@dataclass
class EditResult:
    text: str
    saved: bool


class EditSession:
    """
    Opened in EDITING with the row's text at that moment. `finish` closes it
    exactly once: confirm and blur pass save=True, cancel passes save=False.
    """

    def __init__(self, task_id: str, original_text: str):
        self.task_id = task_id
        self.original_text = original_text
        self.state = EDITING

    @property
    def is_open(self) -> bool:
        return self.state == EDITING

    def finish(self, value: str | None, save: bool) -> EditResult | None:
        """Close the session. Returns None if it was already closed."""
        if not self.is_open:
            return None
        self.state = VIEWING
        text = (value or "").strip()
        if save and text:
            return EditResult(text=text, saved=True)
        return EditResult(text=self.original_text, saved=False)
