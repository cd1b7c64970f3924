"""Read-only inbox scan: recurring mail patterns and suggested filter rules."""

__version__ = "0.2.1"