"""A list that is guaranteed to hold at least one element, with a double-ended iterator and a non-zero length variant."""

__version__ = "0.11.0"
__all__ = ["core", "iterator", "nonzero"]