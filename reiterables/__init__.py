"""Re-iterable sources and lazy adapters that can be iterated over any number of times."""

__version__ = "0.1.0"

__all__ = ["sources", "cloning", "adapters", "slicing"]