"""Domain layer for the Notifications context."""
