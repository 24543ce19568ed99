"""Test fixtures for pytest.

This module re-exports the models and GraphQL types used across the suite.
"""

from .models import USERS, Base, Color, OrderLine, TagInput, TagType, User, UserType

__all__ = [
    "USERS",
    "Base",
    "Color",
    "OrderLine",
    "TagInput",
    "TagType",
    "User",
    "UserType",
]
