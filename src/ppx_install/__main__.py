"""Allow ``python -m ppx_install``."""

import sys

from ppx_install.cli.main import main

sys.exit(main())
