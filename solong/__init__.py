"""A tile game: collect every plant, then walk through the open door."""

__version__ = "1.0.0"
__all__ = ["__version__"]