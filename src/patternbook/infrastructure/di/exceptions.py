"""Exceptions raised by the dependency injection container."""
from typing import Any, List, Optional, Type


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, "__name__") else str(cls)


class DependencyResolutionError(Exception):
    """Base exception for dependency resolution failures."""

    def __init__(self,
                 dependency_type: Any,
                 message: str,
                 parent_type: Optional[Type] = None,
                 parameter_name: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        self.dependency_type = dependency_type
        self.parent_type = parent_type
        self.parameter_name = parameter_name
        self.cause = cause
        if parent_type is not None:
            message = (f"{message} (required by {_type_name(parent_type)}"
                       + (f" parameter '{parameter_name}'" if parameter_name else "") + ")")
        super().__init__(message)


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a type is neither registered nor constructible."""

    def __init__(self, dependency_type: Any,
                 parent_type: Optional[Type] = None,
                 parameter_name: Optional[str] = None):
        super().__init__(
            dependency_type,
            f"No registration found for {_type_name(dependency_type)}",
            parent_type,
            parameter_name,
        )


class UntypedParameterError(DependencyResolutionError):
    """Raised when a constructor parameter has no type annotation."""

    def __init__(self, dependency_type: Type, parameter_name: str):
        super().__init__(
            dependency_type,
            f"Cannot resolve untyped parameter '{parameter_name}' of {_type_name(dependency_type)}",
        )


class CircularDependencyError(DependencyResolutionError):
    """Raised when resolving a type requires the type itself."""

    def __init__(self, chain: List[Type]):
        self.chain = chain
        super().__init__(
            chain[-1],
            "Circular dependency detected: " + " -> ".join(_type_name(c) for c in chain),
        )


class InstantiationError(DependencyResolutionError):
    """Raised when a constructor fails with resolved dependencies."""

    def __init__(self, dependency_type: Type, message: str, cause: Optional[BaseException] = None):
        super().__init__(dependency_type, message, cause=cause)


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory function fails."""

    def __init__(self, dependency_type: Type, message: str, cause: Optional[BaseException] = None):
        super().__init__(dependency_type, message, cause=cause)
