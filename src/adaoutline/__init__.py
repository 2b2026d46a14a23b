"""adaoutline - navigation index builder for Ada source files."""

__version__ = "0.1.0"
