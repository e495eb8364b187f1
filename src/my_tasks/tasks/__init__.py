"""
Task subsystem.

Components:
- task_models.py: data structure (Task)
- task_store.py: list operations, JSON codec and the key-value persistence bridge
"""
