"""Cross-platform build automation script for dirtree.

Produces a single-file executable with PyInstaller.

Supports:
  - macOS (arm64 / x86_64)
  - Windows 10 / 11
  - Linux
"""

from __future__ import annotations

import platform
import shutil
import subprocess
import sys
from pathlib import Path

APP_NAME = "dirtree"


def _ensure_dependencies() -> None:
    """Install PyInstaller if missing."""
    try:
        __import__("PyInstaller")
    except ImportError:
        print("Installing pyinstaller ...")
        subprocess.check_call(
            [sys.executable, "-m", "pip", "install", "pyinstaller"],
            stdout=subprocess.DEVNULL,
        )


def main() -> None:
    project_root = Path(__file__).resolve().parent
    entry_point = project_root / "run.py"

    if not entry_point.exists():
        print(f"Error: {entry_point} not found.")
        sys.exit(1)

    os_name = platform.system()    # Darwin / Windows / Linux
    arch = platform.machine()      # arm64 / x86_64 / AMD64
    print(f"=== {APP_NAME} build ===")
    print(f"OS:       {os_name}")
    print(f"Arch:     {arch}")
    print(f"Python:   {sys.version}")
    print()

    # ---- Pre-build checks ----
    _ensure_dependencies()

    # ---- Clean previous build ----
    for d in ("build", "dist"):
        target = project_root / d
        if target.exists():
            print(f"Cleaning {target} ...")
            shutil.rmtree(target)

    # ---- Run PyInstaller ----
    cmd = [
        sys.executable,
        "-m",
        "PyInstaller",
        str(entry_point),
        "--name",
        APP_NAME,
        "--onefile",
        "--console",
        "--paths",
        str(project_root / "src"),
        "--clean",
        "--noconfirm",
    ]

    print(f"Running: {' '.join(cmd)}")
    print()

    result = subprocess.run(cmd, cwd=str(project_root))

    if result.returncode != 0:
        print()
        print("=== Build FAILED ===")
        sys.exit(result.returncode)

    # ---- Report ----
    exe_name = f"{APP_NAME}.exe" if os_name == "Windows" else APP_NAME
    exe_path = project_root / "dist" / exe_name
    size_mb = exe_path.stat().st_size / (1024 * 1024)

    print()
    print("=== Build successful! ===")
    print(f"Binary:   {exe_path}")
    print(f"Size:     {size_mb:.1f} MB")
    print()
    if os_name == "Windows":
        print(f'Run:  "{exe_path}" . -f')
    else:
        print(f"Run:  {exe_path} . -f")


if __name__ == "__main__":
    main()
