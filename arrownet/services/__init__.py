"""Scheduling, layout and the engine facade."""
