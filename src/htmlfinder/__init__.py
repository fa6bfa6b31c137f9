"""Full-text search over a directory of HTML documents."""

__version__ = "0.1.0"
