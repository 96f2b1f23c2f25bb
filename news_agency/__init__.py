"""News agency article manager — console and HTTP front-ends over one article store."""

__version__ = "1.0.0"
