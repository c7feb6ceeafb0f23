"""Temperature and resistance conversions for platinum RTD sensors."""

__version__ = "1.0.0"
__all__ = ["sensor", "cli"]