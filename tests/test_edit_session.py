# tests/test_edit_session.py

from __future__ import annotations

from tasker.ui.edit_session import EDITING, VIEWING, EditSession


def test_confirm_with_text_saves_trimmed_value() -> None:
    session = EditSession("1", "old")
    assert session.state == EDITING

    result = session.finish("  new ", save=True)

    assert result is not None
    assert (result.text, result.saved) == ("new", True)
    assert session.state == VIEWING


def test_empty_commit_reverts() -> None:
    result = EditSession("1", "old").finish("   ", save=True)
    assert (result.text, result.saved) == ("old", False)


def test_cancel_reverts_even_with_text() -> None:
    result = EditSession("1", "old").finish("typed", save=False)
    assert (result.text, result.saved) == ("old", False)


def test_finish_happens_once() -> None:
    session = EditSession("1", "old")
    session.finish("new", save=True)

    assert session.finish("again", save=True) is None
    assert not session.is_open
