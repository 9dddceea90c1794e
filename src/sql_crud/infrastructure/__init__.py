"""Schema and SQL infrastructure."""
