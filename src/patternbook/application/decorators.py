"""
Demo registration decorator.

Every demonstration module exposes one or more entry points marked with
``@demo``. Importing the module registers them; the CLI and the runner only
ever look demos up by name.

Usage:
    @demo("decorator", category="patterns", summary="Add behaviour to one object")
    def run() -> None:
        ...
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional

from patternbook.domain.base.entity import Entity
from patternbook.domain.base.exceptions import DemoNotFoundError

DemoFunction = Callable[[], None]


class DemoRegistration(Entity):
    """A registered demonstration entry point."""

    name: str
    category: str
    summary: str
    module: str
    entry_point: DemoFunction

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "category": self.category,
            "summary": self.summary,
            "module": self.module,
        }


_demo_registry: Dict[str, DemoRegistration] = {}


def _first_line(text: Optional[str]) -> str:
    lines = (text or "").strip().splitlines()
    return lines[0] if lines else ""


def demo(name: str, category: str = "misc", summary: str = ""):
    """
    Mark a function as a runnable demonstration.

    Args:
        name: Unique demo name used on the command line
        category: Grouping shown by ``patternbook list``
        summary: One-line description

    Returns:
        Decorator registering the function and returning it unchanged
    """
    def decorator(func: DemoFunction) -> DemoFunction:
        existing = _demo_registry.get(name)
        if existing is not None and (existing.module, existing.entry_point.__qualname__) != (func.__module__, func.__qualname__):
            raise ValueError(f"Demo '{name}' is already registered by {existing.module}")

        _demo_registry[name] = DemoRegistration(
            name=name,
            category=category,
            summary=summary or _first_line(func.__doc__),
            module=func.__module__,
            entry_point=func,
        )
        func._demo_name = name
        return func

    return decorator


def get_demo(name: str) -> DemoRegistration:
    """Look up a registered demo, raising DemoNotFoundError if absent."""
    try:
        return _demo_registry[name]
    except KeyError:
        raise DemoNotFoundError(name) from None


def get_demo_registry(category: Optional[str] = None) -> List[DemoRegistration]:
    """Registered demos sorted by category then name."""
    registrations = sorted(_demo_registry.values(), key=lambda r: (r.category, r.name))
    if category is not None:
        registrations = [r for r in registrations if r.category == category]
    return registrations


def get_registry_stats() -> Dict[str, int]:
    """Number of registered demos per category."""
    stats: Dict[str, int] = {}
    for registration in _demo_registry.values():
        stats[registration.category] = stats.get(registration.category, 0) + 1
    return stats
