"""patternbook - Root Package.

A catalogue of small, runnable object-oriented design demonstrations.

Key Components:
    - patterns: creational and structural patterns (abstract factory, factory
      method, decorator, singleton, template method)
    - solid: the SOLID principles plus DRY, each shown before and after
    - injection: dependency-injection styles and a small DI container
    - application: the demo registry and runner
    - cli: the ``patternbook`` command line

Usage:
    $ patternbook list
    $ patternbook run decorator
    $ patternbook run --all
"""

from ._version import __version__

__package_name__ = "patternbook"
