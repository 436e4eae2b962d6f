"""Labor contract engine: wage compliance and contract lifecycle."""

__version__ = "0.1.0"
