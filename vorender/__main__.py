"""Allow ``python -m vorender``."""
import sys

from vorender.cli import main

sys.exit(main())
