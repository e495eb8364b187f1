# src/my_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NO_SUMMARY_TEXT = "No summary was provided for this task"


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single task.

    There is no id: a task is identified by its position in the list,
    so two tasks with identical content are told apart only by index.
    """

    title: str
    summary: str = ""

    @property
    def summary_text(self) -> str:
        return self.summary or NO_SUMMARY_TEXT

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "summary": self.summary}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        title = raw.get("title")
        summary = raw.get("summary")
        return cls(
            title="" if title is None else str(title),
            summary="" if summary is None else str(summary),
        )
