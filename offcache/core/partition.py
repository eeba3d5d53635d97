"""Exclusion filtering and distribution of assets into cache buckets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from .constants import BUCKETS, REST_KEY, WARNING_PREFIX
from .errors import DuplicateRestError
from .glob import compile_glob, matches_any_glob
from .pool import AssetPool

log = logging.getLogger(__name__)


@dataclass
class Partition:
    """Raw (not yet rewritten) assets per bucket, in bucket order."""

    buckets: dict[str, list[str]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    rest_bucket: str | None = None


def exclude_assets(assets: Iterable[str], excludes: Sequence[str]) -> list[str]:
    """Drop every asset matching any exclude glob, keeping input order."""
    if not excludes:
        return list(assets)
    return [a for a in assets if not matches_any_glob(a, excludes)]


def find_rest_bucket(spec: Mapping[str, Sequence[str]]) -> str | None:
    """Return the bucket holding the `:rest:` selector.

    Raises DuplicateRestError when it is declared more than once.
    """
    rest: str | None = None
    for bucket in BUCKETS:
        for selector in spec.get(bucket) or ():
            if selector != REST_KEY:
                continue
            if rest is not None:
                raise DuplicateRestError(f"The {REST_KEY} keyword can be used only once")
            rest = bucket
    return rest


def _warn(result: Partition, message: str) -> None:
    message = f"{WARNING_PREFIX} {message}"
    log.warning(message)
    result.warnings.append(message)


def partition_assets(
    assets: Iterable[str],
    spec: Mapping[str, Sequence[str]],
    externals: Sequence[str] = (),
) -> Partition:
    """Distribute `assets` over the buckets described by `spec`.

    Buckets are processed as main, additional, optional; inside a bucket the
    selectors run in declared order and each claimed asset leaves the pool.
    Buckets with no selectors are left out of the result.
    """
    pool = AssetPool(assets)
    result = Partition()
    known_externals = set(externals)

    for bucket in BUCKETS:
        selectors = spec.get(bucket) or ()
        if not selectors:
            continue
        claimed: list[str] = []

        for selector in selectors:
            if selector == REST_KEY:
                if result.rest_bucket is not None:
                    raise DuplicateRestError(f"The {REST_KEY} keyword can be used only once")
                result.rest_bucket = bucket
                continue

            matcher = compile_glob(selector)
            if matcher is not None:
                matched = pool.claim_matching(matcher.match)
                if not matched:
                    _warn(result, f"Cache pattern [{selector}] did not match any assets")
                claimed.extend(matched)
                continue

            if not pool.claim(selector) and selector not in known_externals:
                _warn(result, f"Cache asset [{selector}] is not found in output assets")
            claimed.append(selector)

        result.buckets[bucket] = claimed

    if result.rest_bucket is not None and len(pool):
        result.buckets[result.rest_bucket].extend(pool.drain())

    return result
