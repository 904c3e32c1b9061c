"""Academic candidate submission scoring and review engine."""

__version__ = "0.1.0"
