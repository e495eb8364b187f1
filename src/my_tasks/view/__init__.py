"""
View subsystem.

Components:
- binding.py: store state -> rows, user intents -> store calls, dialog state
- theme.py: colour scheme (persisted separately) and terminal palette
- render.py: plain-text rendering of the view model
"""
