"""Media cache paths, a binary media info format, search-name cleaning, and HTML form and link extraction."""

__version__ = "0.1.0"