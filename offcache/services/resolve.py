"""Service: resolve a build output directory into cache buckets."""

from __future__ import annotations

import json
import os
from typing import Any

from ..core.engine import Emission, OfflineEngine
from ..core.errors import OfflineConfigError
from ..core.tools import ToolConfig
from .assets import collect_assets


def load_options(path: str | None) -> dict[str, Any]:
    """Read engine options from a JSON file; a missing file means defaults."""
    if not path or not os.path.isfile(path):
        return {}
    with open(path, encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as e:
            raise OfflineConfigError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise OfflineConfigError(f"{path}: expected a JSON object")
    return data


def _report_writer(out_dir: str):
    def write(tool: ToolConfig, emission: Emission) -> str:
        target = os.path.join(out_dir, f"{tool.name}.json")
        payload = {
            "version": emission.version,
            "hash": emission.hash,
            "strategy": emission.strategy.value,
            "caches": emission.caches_for(tool),
        }
        with open(target, "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2)
            fh.write("\n")
        return target

    return write


def resolve_dist(
    *,
    dist: str,
    config_file: str | None,
    out_dir: str | None = None,
    build_hash: str | None = None,
) -> Emission:
    engine = OfflineEngine(load_options(config_file))
    assets = collect_assets(dist)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
        writer = _report_writer(out_dir)
        handlers = {tool.name: writer for tool in engine.tools}
    else:
        handlers = {tool.name: (lambda tool, emission: None) for tool in engine.tools}
    return engine.emit(assets, handlers, build_hash=build_hash)
