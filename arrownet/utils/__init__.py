"""Graph construction and logging helpers."""
