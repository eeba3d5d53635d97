"""Fan-out to the cache-consuming collaborators (service worker, appcache)."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence, TypeVar

from .constants import MAX_TOOL_WORKERS
from .errors import ToolError

T = TypeVar("T")


@dataclass(frozen=True)
class ToolConfig:
    name: str
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def caches(self) -> list[str] | None:
        """Buckets this tool consumes; None means all of them."""
        caches = self.options.get("caches")
        return list(caches) if isinstance(caches, (list, tuple)) else None


def run_tools(tools: Sequence[ToolConfig], fn: Callable[[ToolConfig], T]) -> dict[str, T]:
    """Run `fn` for every tool concurrently and wait for all of them.

    If any call fails, ToolError is raised for the first failure once every
    task has finished; partial results are discarded.
    """
    if not tools:
        return {}

    results: dict[str, T] = {}
    failure: tuple[str, BaseException] | None = None
    with ThreadPoolExecutor(max_workers=min(MAX_TOOL_WORKERS, len(tools))) as pool:
        futures = {pool.submit(fn, tool): tool.name for tool in tools}
        for fut in as_completed(futures):
            name = futures[fut]
            try:
                results[name] = fut.result()
            except Exception as e:
                if failure is None:
                    failure = (name, e)

    if failure is not None:
        name, exc = failure
        raise ToolError(name, f"{exc!r}") from exc
    return {tool.name: results[tool.name] for tool in tools}
