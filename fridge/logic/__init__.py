"""Core business logic layer.

Subpackages:
- shopping: deriving shopping lists from the action history
"""
__all__ = ["shopping"]
