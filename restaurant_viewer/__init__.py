"""Restaurant spreadsheet viewer: import, search and map projection pipeline."""

__version__ = "0.1.0"
