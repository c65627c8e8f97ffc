"""Functions solving classic array, string, integer, folder and tree puzzles."""

__version__ = "0.1.0"
__all__ = ["arrays", "folders", "integers", "strings", "trees"]