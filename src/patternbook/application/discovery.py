"""Demo discovery by importing the demonstration packages."""
import importlib
import pkgutil
from pathlib import Path
from typing import Iterable, List

from patternbook.application.decorators import get_registry_stats
from patternbook.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

DEMO_PACKAGES = (
    "patternbook.patterns",
    "patternbook.solid",
    "patternbook.injection",
)


def discover_demos(packages: Iterable[str] = DEMO_PACKAGES) -> List[str]:
    """
    Import every module under the given packages.

    Importing triggers the ``@demo`` decorators, which register the entry
    points. Import errors propagate: a broken demo module is a bug.

    Returns:
        Names of the imported modules
    """
    imported = []
    for base_package in packages:
        package = importlib.import_module(base_package)
        package_path = Path(package.__file__).parent
        for module_info in pkgutil.walk_packages([str(package_path)], f"{base_package}."):
            importlib.import_module(module_info.name)
            imported.append(module_info.name)
            logger.debug("Imported demo module", module=module_info.name)

    logger.debug("Demo discovery complete", stats=get_registry_stats())
    return imported
