"""Kernel – errors, result type, value objects and ports."""
