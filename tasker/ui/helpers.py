"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from tasker.config import COLOR_DONE, COLOR_TEXT_MAIN, COLOR_TEXT_MUTED
from tasker.domain.filters import FILTER_ACTIVE, FILTER_COMPLETED

FILTER_LABELS = {
    FILTER_ACTIVE: "Active",
    FILTER_COMPLETED: "Completed",
}


def filter_label(value: str) -> str:
    return FILTER_LABELS.get(value, "All")


def format_remaining(count: int) -> str:
    """'1 item left' / 'N items left'."""
    noun = "item" if count == 1 else "items"
    return f"{count} {noun} left"


def text_color(completed: bool) -> str:
    return COLOR_TEXT_MUTED if completed else COLOR_TEXT_MAIN


def status_color(completed: bool) -> str:
    return COLOR_DONE if completed else COLOR_TEXT_MUTED
