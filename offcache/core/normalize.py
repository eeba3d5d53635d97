"""Turn rewritten asset paths into manifest entries."""

from __future__ import annotations


def normalize_scope(scope: str | None, relative_paths: bool = False) -> tuple[str, bool]:
    """Return (prefix, relative).

    An empty scope forces relative mode. Otherwise one trailing '/' is
    dropped and exactly one appended, so `/app` and `/app/` both give `/app/`.
    """
    relative = not scope or relative_paths
    if relative:
        return "", True
    if scope.endswith("/"):
        scope = scope[:-1]
    return scope + "/", False


class PathNormalizer:
    def __init__(self, scope: str | None = "/", relative_paths: bool = False) -> None:
        self.prefix, self.relative = normalize_scope(scope, relative_paths)
        # only an absolute prefix marks an entry as already normalized
        self.anchored = len(self.prefix) > 1 and (self.prefix.startswith("/") or "://" in self.prefix)

    def __call__(self, path: str) -> str:
        if self.relative:
            return path[1:] if path.startswith("/") else path
        if self.anchored and path.startswith(self.prefix):
            return path
        if path.startswith("/"):
            path = path[1:]
        return self.prefix + path
