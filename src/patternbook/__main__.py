"""Allow ``python -m patternbook``."""

import sys

from patternbook.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
