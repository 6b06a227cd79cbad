"""Use cases for reading the curriculum catalog."""

from .catalog import get_weekly_content, list_assignments, list_weekly_content

__all__ = ["get_weekly_content", "list_assignments", "list_weekly_content"]
