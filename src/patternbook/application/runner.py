"""Runs registered demos the way a console entry point would."""
from typing import Iterable, List, Optional

from patternbook.application.decorators import DemoRegistration, get_demo, get_demo_registry
from patternbook.config.schemas import DemoConfig
from patternbook.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class DemoRunner:
    """Prints a separator line, then runs each requested demo."""

    def __init__(self, config: Optional[DemoConfig] = None):
        self.config = config or DemoConfig()

    def run(self, name: str) -> DemoRegistration:
        registration = get_demo(name)
        logger.info("Running demo", demo=registration.name, module=registration.module)
        print(self.config.separator)
        registration.entry_point()
        return registration

    def run_many(self, names: Iterable[str]) -> List[DemoRegistration]:
        # Resolve every name first so a typo fails before anything prints
        registrations = [get_demo(name) for name in names]
        return [self.run(registration.name) for registration in registrations]

    def run_all(self) -> List[DemoRegistration]:
        return self.run_many(r.name for r in get_demo_registry())
