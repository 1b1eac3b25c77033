import logging

import pytest

from patternbook.application.discovery import discover_demos
from patternbook.infrastructure.di.container import reset_container
from patternbook.patterns.singleton import TheBell


@pytest.fixture(scope="session")
def demo_modules():
    """Import every demo module so the registry is populated."""
    return discover_demos()


@pytest.fixture
def fresh_bell():
    """Start and finish with no bell instance."""
    TheBell._reset_instance()
    yield
    TheBell._reset_instance()


@pytest.fixture
def clean_container():
    reset_container()
    yield
    reset_container()


@pytest.fixture
def clean_environment(monkeypatch):
    for name in ("PATTERNBOOK_LOG_LEVEL", "PATTERNBOOK_LOG_DESTINATION", "PATTERNBOOK_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
