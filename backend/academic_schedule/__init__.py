"""Academic schedule service: shift slots and professor availability."""

__version__ = "1.0.0"
