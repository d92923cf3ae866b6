"""Printf-style formatting with width, precision and star arguments."""

__version__ = "1.0.0"
__all__ = ["conversions", "formatter", "textutils"]