"""Entry point for running as module: python -m evmexplorer"""

import sys

from evmexplorer.cli import main

if __name__ == "__main__":
    sys.exit(main())
