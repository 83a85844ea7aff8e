"""Student Roster - single-operator student record management backend."""

__version__ = "1.0.0"
