"""Builtin commands, an environment table and C-style string helpers for a small shell."""

__version__ = "0.1.0"
__all__ = ["builtins", "environment", "textutil"]