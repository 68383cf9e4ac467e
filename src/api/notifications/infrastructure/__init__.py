"""Infrastructure layer for the Notifications context."""
