"""Engine facade: exclusion -> partitioning -> rewrite/normalization."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from pydantic import ValidationError

from ..config.options import OfflineOptions
from .constants import ENTRY_PREFIX
from .errors import OfflineConfigError, ToolError
from .normalize import PathNormalizer
from .partition import exclude_assets, find_rest_bucket, partition_assets
from .rewrite import Rewriter, make_rule
from .tools import ToolConfig, run_tools
from .types import UpdateStrategy

log = logging.getLogger(__name__)

ToolHandler = Callable[[ToolConfig, "Emission"], Any]


@dataclass
class Resolution:
    """Final manifest entries per bucket plus non-fatal warnings."""

    caches: dict[str, list[str]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)


@dataclass
class Emission:
    """Everything a collaborator needs for one build."""

    caches: dict[str, list[str]]
    warnings: list[str]
    assets: list[str]
    hash: str | None
    version: str
    scope: str
    relative_paths: bool
    strategy: UpdateStrategy

    def caches_for(self, tool: ToolConfig) -> dict[str, list[str]]:
        wanted = tool.caches
        if wanted is None:
            return dict(self.caches)
        return {k: v for k, v in self.caches.items() if k in wanted}


def _by_field_name(data: Mapping[str, Any]) -> dict[str, Any]:
    """Rename camelCase aliases to field names so later keys win on merge."""
    aliases = {f.alias: name for name, f in OfflineOptions.model_fields.items() if f.alias}
    return {aliases.get(key, key): value for key, value in data.items()}


class OfflineEngine:
    """Assigns build output paths to cache buckets.

    Construction validates the configuration and fails fast with
    OfflineConfigError; resolve() itself only ever produces warnings.
    """

    def __init__(self, options: OfflineOptions | Mapping[str, Any] | None = None, **overrides: Any) -> None:
        if isinstance(options, OfflineOptions) and not overrides:
            opts = options
        else:
            data = _by_field_name(options.model_dump() if isinstance(options, OfflineOptions) else dict(options or {}))
            data.update(_by_field_name(overrides))
            try:
                opts = OfflineOptions.model_validate(data)
            except ValidationError as e:
                raise OfflineConfigError(f"Invalid offline options: {e}") from e

        self.options = opts
        self.strategy = UpdateStrategy(opts.update_strategy)
        self.externals = list(opts.externals)
        self.excludes = list(opts.excludes)
        self.spec = None if opts.simplified else opts.caches.as_mapping()
        if self.spec is not None:
            find_rest_bucket(self.spec)

        self.normalizer = PathNormalizer(opts.scope, opts.relative_paths)
        self.scope = self.normalizer.prefix
        self.relative_paths = self.normalizer.relative
        self.rewrite = Rewriter(make_rule(opts.rewrites), ENTRY_PREFIX)

        self.tools = [ToolConfig(name, tool_opts) for name, tool_opts in opts.tool_options().items()]
        if not self.tools:
            raise OfflineConfigError("You should have at least one cache service to be specified")

    @property
    def version(self) -> str:
        version = self.options.version
        return str(version()) if callable(version) else str(version)

    def validate_paths(self, assets: Iterable[str]) -> list[str]:
        """Rewrite, drop empties, then normalize."""
        out: list[str] = []
        for asset in assets:
            rewritten = self.rewrite(asset)
            if rewritten:
                out.append(self.normalizer(rewritten))
        return out

    def filter_assets(self, assets: Iterable[str]) -> list[str]:
        return exclude_assets(assets, self.excludes)

    def resolve(self, assets: Iterable[str]) -> Resolution:
        return self._resolve_filtered(self.filter_assets(assets))

    def _resolve_filtered(self, assets: list[str]) -> Resolution:
        if self.spec is None:
            return Resolution(caches={"main": self.validate_paths(assets)})

        part = partition_assets(assets, self.spec, self.externals)
        caches = {bucket: self.validate_paths(raw) for bucket, raw in part.buckets.items()}
        log.debug("resolved %d bucket(s), %d warning(s)", len(caches), len(part.warnings))
        return Resolution(caches=caches, warnings=part.warnings)

    def use_tools(self, fn: Callable[[ToolConfig], Any]) -> dict[str, Any]:
        return run_tools(self.tools, fn)

    def emit(
        self,
        assets: Iterable[str],
        handlers: Mapping[str, ToolHandler],
        build_hash: str | None = None,
    ) -> Emission:
        """Resolve `assets` and hand the result to every enabled tool."""
        missing = [t.name for t in self.tools if t.name not in handlers]
        if missing:
            raise ToolError(missing[0], "no handler registered")

        filtered = self.filter_assets(assets)
        resolution = self._resolve_filtered(filtered)
        emission = Emission(
            caches=resolution.caches,
            warnings=resolution.warnings,
            assets=filtered,
            hash=build_hash,
            version=self.version,
            scope=self.scope,
            relative_paths=self.relative_paths,
            strategy=self.strategy,
        )
        self.use_tools(lambda tool: handlers[tool.name](tool, emission))
        return emission
