"""flavorhub — recipe catalogue with a deterministic recipe of the day."""

__version__ = "0.1.0"
