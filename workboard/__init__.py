"""Workboard - project management REST API with Kanban boards and backlogs."""

__version__ = "1.0.0"
