"""Allow running the package with python -m ptbuilder (same as the ptbuilder console script)."""
import sys

from ptbuilder.main import main

sys.exit(main())
