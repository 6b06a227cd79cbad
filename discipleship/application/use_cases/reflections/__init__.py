"""Use cases for weekly reflections."""

from .reflections import create_reflection, list_reflections

__all__ = ["create_reflection", "list_reflections"]
