"""Kernel – framework-agnostic building blocks."""

from flagstore.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
