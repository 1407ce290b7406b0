"""Repository pattern implementation.

This module provides data access layer abstractions following the Repository pattern
for clean separation of concerns and improved testability.
"""

from .base import BaseRepository
from .user_repository import UserRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
]
