"""repolayout — priority-driven repository layout selection."""

__version__ = "0.1.0"
