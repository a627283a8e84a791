"""Utilities for a messaging performance harness: configuration lists, locks, string building, blank-padded fields and payload helpers."""

__version__ = "0.1.0"
__all__ = ["blankpad", "namevalue", "spinlock", "stringbuffer", "textutil"]