# src/patternbook/domain/base/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(DomainException):
    """Raised when input fails validation."""
    pass


class UnsupportedOptionError(DomainException):
    """Raised when a factory is asked for an option it does not implement."""
    def __init__(self, option_kind: str, option: Any, supported: Optional[List[str]] = None):
        super().__init__(f"Unsupported {option_kind}: {option!r}", supported)
        self.option_kind = option_kind
        self.option = option
        self.supported = supported or []


class DemoNotFoundError(DomainException):
    """Raised when a requested demo is not registered."""
    def __init__(self, name: str):
        super().__init__(f"Demo '{name}' is not registered")
        self.name = name


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class MissingDependencyError(DomainException):
    """Raised when an injected collaborator is used before it was supplied."""
    def __init__(self, owner: str, dependency: str):
        super().__init__(f"{owner}.{dependency} has not been set")
        self.owner = owner
        self.dependency = dependency
