"""Rewrite rules mapping a raw asset path to its manifest path (or None to drop it)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Union

from .constants import ENTRY_PREFIX

RewriteFn = Callable[[str], Optional[str]]
RewriteTable = Mapping[str, Optional[str]]

_INDEX = re.compile(r"^(.*/)?index\.html?$", re.DOTALL)


def rewrite_index(asset: str) -> str:
    """`foo/index.html` -> `foo/`, `index.htm` -> `/`; anything else is unchanged."""
    m = _INDEX.match(asset)
    if not m:
        return asset
    return m.group(1) or "/"


@dataclass(frozen=True)
class FunctionRule:
    fn: RewriteFn

    def __call__(self, asset: str) -> str | None:
        return self.fn(asset)


@dataclass(frozen=True)
class TableRule:
    table: RewriteTable

    def __call__(self, asset: str) -> str | None:
        if asset not in self.table:
            return asset
        return self.table[asset]


RewriteRule = Union[FunctionRule, TableRule]


def make_rule(rewrites: RewriteFn | RewriteTable | None) -> RewriteRule:
    """Pick the rule variant once; None selects the index rewrite."""
    if rewrites is None:
        return FunctionRule(rewrite_index)
    if callable(rewrites):
        return FunctionRule(rewrites)
    return TableRule(dict(rewrites))


class Rewriter:
    """Apply a rule, always dropping the internal entry-point assets first."""

    def __init__(self, rule: RewriteRule, entry_prefix: str = ENTRY_PREFIX) -> None:
        self.rule = rule
        self.entry_prefix = entry_prefix

    def __call__(self, asset: str) -> str | None:
        if asset.startswith(self.entry_prefix):
            return None
        return self.rule(asset) or None
