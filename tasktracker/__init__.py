"""Command-line task tracker that keeps its tasks in a JSON file."""

__version__ = "0.1.0"
__all__ = ["__version__"]