"""Application layer - demo registration, discovery and execution."""
from .decorators import DemoRegistration, demo, get_demo, get_demo_registry, get_registry_stats
from .discovery import discover_demos
from .runner import DemoRunner

__all__ = [
    "DemoRegistration",
    "DemoRunner",
    "demo",
    "discover_demos",
    "get_demo",
    "get_demo_registry",
    "get_registry_stats",
]
