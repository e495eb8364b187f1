"""My Tasks: a small task-list manager with a local key-value store."""

__version__ = "0.1.0"
