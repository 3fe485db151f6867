"""Project models for Workboard."""

from workboard.c1_project_models.project import Project

__all__ = ["Project"]
