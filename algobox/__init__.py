"""Classic algorithms, data structures and small terminal games."""

__version__ = "0.1.0"