"""Service: discover build output files."""

from __future__ import annotations

from pathlib import Path


def collect_assets(dist: str) -> list[str]:
    """Return every file under `dist` as a sorted posix path relative to it."""
    root = Path(dist)
    if not root.is_dir():
        raise FileNotFoundError(f"Build output directory not found: {dist}")
    files = (f for f in root.glob("**/*") if f.is_file())
    return sorted(f.relative_to(root).as_posix() for f in files)
