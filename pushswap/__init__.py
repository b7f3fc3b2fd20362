"""Two-stack integer sorting with a restricted instruction set, plus small string, formatting and byte-buffer helpers."""

__version__ = "0.1.0"