"""
Dependency Injection Container implementation.

The container resolves a requested type from, in order: a pre-registered
instance, a singleton registration, a factory registration, and finally by
constructing the type directly, resolving each constructor parameter from its
type annotation.
"""
import inspect
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Type, TypeVar, cast, get_type_hints

from patternbook.infrastructure.di.exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    FactoryError,
    InstantiationError,
    UnregisteredDependencyError,
    UntypedParameterError,
)
from patternbook.infrastructure.logging.logger import get_logger

T = TypeVar('T')
logger = get_logger(__name__)

_PRIMITIVE_TYPES = (str, int, float, bool, bytes)


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


def _name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DIContainer:
    """
    Dependency injection container.

    Registrations:
    - ``register_instance``: always return the given object
    - ``register_singleton``: build once (from a class or a factory), then reuse
    - ``register_factory``: call the factory with the container on every request

    Unregistered concrete classes are built by autowiring their constructor.
    """

    def __init__(self):
        self._singletons: Dict[Type, Any] = {}
        self._factories: Dict[Type, Callable[..., Any]] = {}
        self._instances: Dict[Type, Any] = {}

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return (
            cls in self._singletons or
            cls in self._factories or
            cls in self._instances
        )

    def register_singleton(self, cls: Type[T], instance_or_factory: Any = None) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            instance_or_factory: Optional implementation class, pre-created
                instance, or factory function taking the container
        """
        if instance_or_factory is None:
            self._singletons[cls] = cls
            logger.debug(f"Registered singleton type {_name(cls)}")
        elif isinstance(instance_or_factory, type):
            self._singletons[cls] = instance_or_factory
            logger.debug(f"Registered singleton {_name(cls)} -> {_name(instance_or_factory)}")
        elif callable(instance_or_factory):
            try:
                instance = instance_or_factory(self)
            except Exception as e:
                logger.error(f"Failed to create singleton from factory for {_name(cls)}: {str(e)}")
                raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e
            self._singletons[cls] = instance
            logger.debug(f"Registered singleton from factory for {_name(cls)}")
        else:
            self._singletons[cls] = instance_or_factory
            logger.debug(f"Registered pre-created singleton for {_name(cls)}")

    def register_factory(self, cls: Type[T], factory: Callable[..., T]) -> None:
        """
        Register a factory function for a type.

        Args:
            cls: Class type to register
            factory: Factory function taking the container and returning an instance
        """
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {_name(cls)}")

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """
        Register a specific instance for a type.

        Args:
            cls: Class type to register
            instance: Instance to use
        """
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {_name(cls)}")

    def get(self, cls: Type[T], parent_type: Optional[Type] = None,
            parameter_name: Optional[str] = None,
            dependency_chain: Optional[List[Type]] = None) -> T:
        """
        Get an instance of the specified type.

        Args:
            cls: Class type to get
            parent_type: Optional parent type that requires this dependency
            parameter_name: Optional parameter name in the parent type
            dependency_chain: Types currently being resolved, outermost first

        Returns:
            Instance of the requested type

        Raises:
            DependencyResolutionError: If the dependency cannot be resolved
        """
        class_name = _name(cls)

        if dependency_chain is None:
            dependency_chain = []

        if cls in dependency_chain:
            raise CircularDependencyError(dependency_chain + [cls])

        new_chain = dependency_chain + [cls]

        logger.debug(f"Resolving dependency: {class_name}" +
                     (f" for {_name(parent_type)}" if parent_type else "") +
                     (f" parameter '{parameter_name}'" if parameter_name else ""))

        with timed_operation(f"Resolve {class_name}"):
            if cls in self._instances:
                return cast(T, self._instances[cls])

            if cls in self._singletons:
                registered = self._singletons[cls]
                if isinstance(registered, type):
                    instance = self._create_instance(registered, new_chain, parent_type, parameter_name)
                    self._singletons[cls] = instance
                    logger.debug(f"Singleton instance created for {class_name}")
                    return cast(T, instance)
                return cast(T, registered)

            if cls in self._factories:
                try:
                    return cast(T, self._factories[cls](self))
                except DependencyResolutionError:
                    raise
                except Exception as e:
                    logger.error(f"Factory failed to create instance of {class_name}: {str(e)}")
                    raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e

            logger.debug(f"No registration found for {class_name}, attempting direct creation")
            return self._create_instance(cls, new_chain, parent_type, parameter_name)

    def _create_instance(self, cls: Type[T], dependency_chain: List[Type],
                         parent_type: Optional[Type] = None,
                         parameter_name: Optional[str] = None) -> T:
        """Create an instance of cls, resolving constructor dependencies from the container."""
        class_name = _name(cls)

        if not isinstance(cls, type) or inspect.isabstract(cls) or cls in _PRIMITIVE_TYPES:
            raise UnregisteredDependencyError(cls, parent_type, parameter_name)

        with timed_operation(f"Create instance of {class_name}"):
            try:
                signature = inspect.signature(cls.__init__)
                hints = get_type_hints(cls.__init__)
            except (ValueError, TypeError, NameError) as e:
                raise InstantiationError(cls, f"Failed to inspect constructor: {str(e)}", cause=e) from e

            kwargs = {}
            for param in list(signature.parameters.values())[1:]:
                if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                    continue

                annotation = hints.get(param.name, inspect.Parameter.empty)
                has_default = param.default is not inspect.Parameter.empty

                if annotation is inspect.Parameter.empty:
                    if has_default:
                        continue
                    raise UntypedParameterError(cls, param.name)

                if has_default and not self.is_registered(annotation):
                    # Optional collaborators fall back to their defaults
                    continue

                kwargs[param.name] = self.get(annotation, cls, param.name, dependency_chain)

            try:
                instance = cls(**kwargs)
            except Exception as e:
                logger.error(f"Failed to instantiate {class_name} with resolved dependencies: {str(e)}")
                raise InstantiationError(
                    cls, f"Failed to instantiate with resolved dependencies: {str(e)}", cause=e
                ) from e

            logger.debug(f"Successfully created instance of {class_name}")
            return instance

    def clear(self) -> None:
        """Clear all registrations."""
        self._singletons.clear()
        self._factories.clear()
        self._instances.clear()
        logger.debug("Cleared all registrations")


_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get the process-wide container, creating it on first use."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Reset the global container instance."""
    global _container
    if _container:
        _container.clear()
    _container = None
