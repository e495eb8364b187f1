# src/my_tasks/view/binding.py

"""
View binding: task store state -> display rows, user intents -> store calls.

Key invariants:
- at most one dialog is open at a time (create, edit or delete),
- the edit form is always re-derived from the current list, never cached,
- every mutation closes the dialog, so a targeted index never outlives
  the list it was taken from,
- confirming against an index that is no longer in range is a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import TaskRepo
from ..tasks.task_models import Task
from .theme import ThemeController

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "You have no tasks"
NEW_TASK_LABEL = "New Task"


class DialogKind(StrEnum):
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class Dialog:
    kind: DialogKind
    title: str
    confirm_label: str
    index: int | None = None
    message: str | None = None


@dataclass(frozen=True, slots=True)
class TaskRow:
    index: int
    title: str
    summary_text: str
    has_summary: bool


@dataclass(frozen=True, slots=True)
class EditForm:
    title: str
    summary: str


@dataclass(frozen=True, slots=True)
class ViewModel:
    app_title: str
    theme_icon: str
    rows: list[TaskRow]
    empty_message: str | None
    new_task_label: str
    dialog: Dialog | None


def _create_dialog() -> Dialog:
    return Dialog(kind=DialogKind.CREATE, title="New Task", confirm_label="Create Task")


def _edit_dialog(index: int) -> Dialog:
    return Dialog(kind=DialogKind.EDIT, title="Edit Task", confirm_label="Save Changes", index=index)


def _delete_dialog(index: int) -> Dialog:
    return Dialog(
        kind=DialogKind.DELETE,
        title="Confirm Delete",
        confirm_label="Delete",
        index=index,
        message="Are you sure you want to delete this task?",
    )


class ViewBinding:
    def __init__(self, store: TaskRepo, theme: ThemeController, *, app_title: str = "My Tasks") -> None:
        self._store = store
        self._theme = theme
        self._app_title = app_title
        self._dialog: Dialog | None = None

    @property
    def dialog(self) -> Dialog | None:
        return self._dialog

    # ---- rendering ----

    def rows(self) -> list[TaskRow]:
        return [
            TaskRow(index=i, title=t.title, summary_text=t.summary_text, has_summary=bool(t.summary))
            for i, t in enumerate(self._store.tasks)
        ]

    def render_model(self) -> ViewModel:
        rows = self.rows()
        return ViewModel(
            app_title=self._app_title,
            theme_icon=self._theme.icon,
            rows=rows,
            empty_message=None if rows else EMPTY_MESSAGE,
            new_task_label=NEW_TASK_LABEL,
            dialog=self._dialog,
        )

    # ---- dialogs ----

    def cancel(self) -> None:
        self._dialog = None

    def open_create(self) -> Dialog:
        self._dialog = _create_dialog()
        return self._dialog

    def request_edit(self, index: int) -> Dialog | None:
        if self._store.get(index) is None:
            logger.debug("Edit requested for missing index=%d", index)
            return None
        self._dialog = _edit_dialog(index)
        return self._dialog

    def request_delete(self, index: int) -> Dialog | None:
        if self._store.get(index) is None:
            logger.debug("Delete requested for missing index=%d", index)
            return None
        self._dialog = _delete_dialog(index)
        return self._dialog

    def edit_form(self) -> EditForm | None:
        """Pre-fill values for the open edit dialog, read from the current list."""
        d = self._dialog
        if d is None or d.kind is not DialogKind.EDIT or d.index is None:
            return None
        task = self._store.get(d.index)
        if task is None:
            return None
        return EditForm(title=task.title, summary=task.summary)

    # ---- confirmations ----

    def confirm_create(self, title: str, summary: str = "") -> bool:
        d = self._dialog
        if d is None or d.kind is not DialogKind.CREATE:
            return False
        self._dialog = None
        return self._store.add(Task(title=title, summary=summary))

    def confirm_edit(self, title: str, summary: str = "") -> bool:
        d = self._dialog
        if d is None or d.kind is not DialogKind.EDIT or d.index is None:
            return False
        self._dialog = None
        return self._store.replace(d.index, Task(title=title, summary=summary))

    def confirm_delete(self) -> bool:
        d = self._dialog
        if d is None or d.kind is not DialogKind.DELETE or d.index is None:
            return False
        self._dialog = None
        return self._store.remove(d.index)

    # ---- theme ----

    def toggle_theme(self) -> str:
        return self._theme.toggle().value
