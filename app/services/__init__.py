"""Services for the checker and community hooks."""

from .checker import CheckerService

__all__ = ["CheckerService"]
