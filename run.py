"""PyInstaller entry point — runs the dirtree CLI."""

import sys
from pathlib import Path


def main() -> int:
    # Ensure the src directory is on the path
    src_dir = Path(__file__).resolve().parent / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from DirTree.cli import main as cli_main

    return cli_main(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
