"""Classic algorithms on integers, text, arrays, matrices, linked lists and an LRU cache."""

__version__ = "0.1.0"
__all__ = ["arrays", "integers", "linked_list", "lru", "matrix", "text"]