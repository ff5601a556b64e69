"""Character, byte and string helpers, a chunked line reader, a linked list and an isometric wireframe renderer."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "output",
    "memory",
    "linereader",
    "cstrings",
    "textops",
    "linked",
    "wireframe",
]