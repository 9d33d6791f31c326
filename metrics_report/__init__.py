"""HTML dashboard generation for computed code metrics."""

__version__ = "1.0.0"
