"""Solutions to short programming-contest problems, grouped by topic into modules."""

__version__ = "0.1.0"