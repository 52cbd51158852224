"""Interactive game command console."""

__version__ = "0.1.0"
