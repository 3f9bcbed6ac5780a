"""Running pace calculator: pace, time and distance conversions."""

__version__ = "0.3.0"
