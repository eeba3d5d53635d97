"""
Pytest fixtures shared by the offcache tests.

- a small build output directory
- a helper to write JSON option files
"""

import json

import pytest


@pytest.fixture(scope="function")
def dist(tmp_path):
    """Provide a build output directory with a few typical assets."""
    root = tmp_path / "dist"
    (root / "js").mkdir(parents=True)
    (root / "css").mkdir()
    (root / "index.html").write_text("<!doctype html>")
    (root / "js" / "app.js").write_text("console.log(1)")
    (root / "js" / "app.js.map").write_text("{}")
    (root / "css" / "site.css").write_text("body{}")
    return root


@pytest.fixture(scope="function")
def write_config(tmp_path):
    """Return a function that dumps options to a JSON file and returns its path."""

    def _write(options, name="offline.json"):
        path = tmp_path / name
        path.write_text(json.dumps(options))
        return str(path)

    return _write
