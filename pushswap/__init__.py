"""Two-stack integer sorting with a fixed set of stack moves."""

__version__ = "0.1.0"