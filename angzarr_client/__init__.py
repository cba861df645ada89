"""Message types, covers, editions, books and errors for Angzarr clients."""

__version__ = "0.2.0"
__all__ = ["books", "constants", "cover", "edition", "errors", "pages"]