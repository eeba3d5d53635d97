"""Ordered working set of unclaimed assets."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator


class AssetPool:
    """Assets not yet claimed by a bucket, kept in build output order.

    Claiming removes an asset for good, so a later selector can never see it.
    Duplicated names are claimed one occurrence at a time.
    """

    def __init__(self, assets: Iterable[str]) -> None:
        self._items: list[str] = list(assets)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __contains__(self, asset: object) -> bool:
        return asset in self._items

    def claim(self, asset: str) -> bool:
        try:
            self._items.remove(asset)
        except ValueError:
            return False
        return True

    def claim_matching(self, predicate: Callable[[str], bool]) -> list[str]:
        claimed: list[str] = []
        remaining: list[str] = []
        for asset in self._items:
            (claimed if predicate(asset) else remaining).append(asset)
        self._items = remaining
        return claimed

    def drain(self) -> list[str]:
        items, self._items = self._items, []
        return items
