"""Presentation layer for the Notifications context."""

from notifications.presentation.routes import router

__all__ = ["router"]
