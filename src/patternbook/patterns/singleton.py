"""
Singleton.

``TheBell`` has exactly one instance per process. Creation is lazy and
guarded by double-checked locking so concurrent first calls still agree on
one instance.
"""
import threading
from typing import Optional

from patternbook.application.decorators import demo
from patternbook.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class TheBell:
    """
    The kitchen bell. Thread-safe singleton.

    ``TheBell()`` and ``TheBell.get_instance()`` both return the shared
    instance.
    """

    _instance: Optional['TheBell'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'TheBell':
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance.rings = 0
                    cls._instance = instance
                    logger.debug("Bell instance created", instance_id=id(cls._instance))
        return cls._instance

    @classmethod
    def get_instance(cls) -> 'TheBell':
        return cls()

    def ring(self) -> None:
        with self._lock:
            self.rings += 1
        print("Ding! Order up!")

    @classmethod
    def _reset_instance(cls) -> None:
        """Forget the shared instance. Tests only."""
        with cls._lock:
            cls._instance = None


@demo("singleton", category="patterns", summary="One bell, however many times you ask for it")
def run() -> None:
    bell = TheBell.get_instance()
    other_bell = TheBell.get_instance()

    print(id(bell))
    print(id(other_bell))
    print(f"Same instance: {bell is other_bell}")
    bell.ring()
