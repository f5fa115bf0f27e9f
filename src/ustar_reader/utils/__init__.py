"""Utility functions for the tar reader."""

from .paths import decode_field, resolve

__all__ = ["decode_field", "resolve"]
