"""huak — a Python project manager inspired by Cargo."""

__version__ = "0.1.0"
