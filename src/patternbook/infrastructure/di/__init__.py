"""Dependency Injection package."""
from .container import (
    DIContainer,
    get_container,
    reset_container
)
from .exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    FactoryError,
    InstantiationError,
    UnregisteredDependencyError,
    UntypedParameterError,
)

__all__ = [
    'DIContainer',
    'get_container',
    'reset_container',
    'DependencyResolutionError',
    'UnregisteredDependencyError',
    'UntypedParameterError',
    'CircularDependencyError',
    'InstantiationError',
    'FactoryError',
]
