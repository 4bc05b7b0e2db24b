"""Bricklaying sequence planner for an automated masonry robot."""

__version__ = "0.1.0"
