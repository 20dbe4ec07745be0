"""Allow ``python -m pca_client``."""

import sys

from pca_client.cli import main

if __name__ == "__main__":
    sys.exit(main())
