"""Option surface of the engine, validated with pydantic."""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.constants import ALL_CACHES, DEFAULT_SCOPE
from ..core.types import UpdateStrategy

TOOL_DEFAULTS: dict[str, dict[str, Any]] = {
    "ServiceWorker": {
        "output": "sw.js",
        "entry": "empty-entry.js",
    },
    "AppCache": {
        "NETWORK": "*",
        "FALLBACK": None,
        "directory": "appcache/",
        "caches": ["main", "additional"],
    },
}


def default_version() -> str:
    return datetime.now().strftime("%x, %X")


def deep_extend(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge `override` into a copy of `base` (dicts only; lists replace)."""
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = deep_extend(out[key], value)
        else:
            out[key] = value
    return out


class CacheSpec(BaseModel):
    """Selectors per bucket: literal names, globs, or ':rest:'."""

    model_config = ConfigDict(extra="ignore")

    main: list[str] = Field(default_factory=list)
    additional: list[str] = Field(default_factory=list)
    optional: list[str] = Field(default_factory=list)

    @field_validator("main", "additional", "optional", mode="before")
    @classmethod
    def _lists_only(cls, v: Any) -> Any:
        return v if isinstance(v, (list, tuple)) else []

    def as_mapping(self) -> dict[str, list[str]]:
        return {"main": self.main, "additional": self.additional, "optional": self.optional}


class OfflineOptions(BaseModel):
    """Engine configuration. Accepts camelCase keys (as in offline.json) or snake_case."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    caches: Union[Literal["all"], CacheSpec] = ALL_CACHES
    scope: Optional[str] = DEFAULT_SCOPE
    update_strategy: UpdateStrategy = Field(default=UpdateStrategy.all, alias="updateStrategy")
    externals: list[str] = Field(default_factory=list)
    excludes: list[str] = Field(default_factory=list)
    relative_paths: bool = Field(default=False, alias="relativePaths")
    rewrites: Union[Callable[[str], Optional[str]], dict[str, Optional[str]], None] = None
    version: Union[Callable[[], Any], str] = default_version
    service_worker: Union[dict[str, Any], None] = Field(
        default_factory=lambda: copy.deepcopy(TOOL_DEFAULTS["ServiceWorker"]), alias="ServiceWorker"
    )
    app_cache: Union[dict[str, Any], None] = Field(
        default_factory=lambda: copy.deepcopy(TOOL_DEFAULTS["AppCache"]), alias="AppCache"
    )

    @model_validator(mode="before")
    @classmethod
    def _merge_tool_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for alias, attr in (("ServiceWorker", "service_worker"), ("AppCache", "app_cache")):
            key = alias if alias in data else attr
            if key not in data:
                continue
            value = data[key]
            if value is None or value is False:
                data[key] = None
            elif isinstance(value, dict):
                data[key] = deep_extend(TOOL_DEFAULTS[alias], value)
            else:
                # `True` or any other truthy marker keeps the defaults
                data[key] = copy.deepcopy(TOOL_DEFAULTS[alias])
        return data

    @field_validator("caches", mode="before")
    @classmethod
    def _caches_default(cls, v: Any) -> Any:
        return ALL_CACHES if v is None else v

    @field_validator("version", mode="before")
    @classmethod
    def _version_text(cls, v: Any) -> Any:
        return v if callable(v) else str(v)

    @field_validator("externals", mode="before")
    @classmethod
    def _externals_list(cls, v: Any) -> Any:
        return v if isinstance(v, (list, tuple)) else []

    @field_validator("excludes", mode="before")
    @classmethod
    def _excludes_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("update_strategy", mode="before")
    @classmethod
    def _known_strategy(cls, v: Any) -> Any:
        allowed = [s.value for s in UpdateStrategy]
        if isinstance(v, UpdateStrategy) or v in allowed:
            return v
        raise ValueError(f"Update strategy must be one of [{','.join(allowed)}]")

    @property
    def simplified(self) -> bool:
        return self.caches == ALL_CACHES

    def tool_options(self) -> dict[str, dict[str, Any]]:
        """Enabled collaborator blocks, in declaration order."""
        tools = {"ServiceWorker": self.service_worker, "AppCache": self.app_cache}
        return {name: opts for name, opts in tools.items() if opts is not None}
