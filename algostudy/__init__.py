"""Classic algorithms and data structures, written to be read and studied."""

__version__ = "0.1.0"