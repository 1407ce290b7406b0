"""Service layer implementations.

This module provides business logic services that orchestrate repository operations.
"""

from .dual_write_service import DualWriteResult, DualWriteService

__all__ = [
    'DualWriteResult',
    'DualWriteService',
]
