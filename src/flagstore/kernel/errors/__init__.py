"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ApplicationError     (application.py)

Flag store operations never raise; these errors belong to the edges around
the store (bootstrap parsing, configuration).
"""

from flagstore.kernel.errors.application import ApplicationError
from flagstore.kernel.errors.base import BaseError
from flagstore.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
