"""Base domain layer - shared kernel for all demonstrations."""

from .entity import AbstractEntity, Entity
from .exceptions import (
    ConfigurationError,
    DemoNotFoundError,
    DomainException,
    MissingDependencyError,
    UnsupportedOptionError,
    ValidationError,
)

__all__ = [
    # Entities
    "Entity",
    "AbstractEntity",
    # Exceptions
    "DomainException",
    "ValidationError",
    "UnsupportedOptionError",
    "DemoNotFoundError",
    "MissingDependencyError",
    "ConfigurationError",
]
