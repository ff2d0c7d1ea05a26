"""Small algorithms on integer sequences, strings and numbers."""

__version__ = "0.1.0"
__all__ = ["arrays", "search", "strings", "numbers"]