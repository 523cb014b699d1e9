"""Tower of Hanoi terminal game with a saved history of finished matches."""

__version__ = "1.0.0"
__all__ = ["cli", "history", "towers"]