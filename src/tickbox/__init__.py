"""tickbox - a small terminal to-do list."""

__version__ = "0.1.0"
