"""Module entrypoint for ``python -m DirTree <path> [-f]``."""

import sys

from DirTree.cli import main


if __name__ == "__main__":
    sys.exit(main())
