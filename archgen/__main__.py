"""Allow running as: python -m archgen"""

import sys

from archgen.main import cli

if __name__ == "__main__":
    sys.exit(cli())
