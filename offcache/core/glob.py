"""Shell-style glob matching for build output paths.

Paths are POSIX-style (forward slashes). Semantics:
- `*`, `?` and `[...]` never cross a '/'
- `**` as a full segment matches zero or more segments
- `{a,b}` and `{1..3}` expand into alternatives before matching
- a segment starting with '.' only matches a pattern segment starting with '.'
"""

from __future__ import annotations

import fnmatch
import re
from functools import lru_cache
from typing import Sequence

_RANGE = re.compile(r"^(?:(-?\d+)\.\.(-?\d+)|([A-Za-z])\.\.([A-Za-z]))$")
MAX_RANGE = 1000


def _brace_alternatives(body: str) -> list[str] | None:
    parts: list[str] = []
    depth = 0
    last = 0
    for i, ch in enumerate(body):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(body[last:i])
            last = i + 1
    if parts:
        parts.append(body[last:])
        return parts

    m = _RANGE.match(body)
    if not m:
        return None
    if m.group(1) is not None:
        lo, hi = int(m.group(1)), int(m.group(2))
        if abs(hi - lo) >= MAX_RANGE:
            return None
        step = 1 if hi >= lo else -1
        return [str(n) for n in range(lo, hi + step, step)]
    lo, hi = ord(m.group(3)), ord(m.group(4))
    step = 1 if hi >= lo else -1
    return [chr(n) for n in range(lo, hi + step, step)]


def expand_braces(pattern: str) -> list[str]:
    """Expand the first expandable brace group, recursively.

    Groups without a top-level comma or a range (e.g. `{a}`) are kept literally.
    """
    i = 0
    while i < len(pattern):
        if pattern[i] != "{":
            i += 1
            continue
        depth = 0
        for j in range(i, len(pattern)):
            if pattern[j] == "{":
                depth += 1
            elif pattern[j] == "}":
                depth -= 1
                if depth == 0:
                    break
        else:
            return [pattern]

        alternatives = _brace_alternatives(pattern[i + 1 : j])
        if alternatives is None:
            i += 1
            continue
        prefix, suffix = pattern[:i], pattern[j + 1 :]
        out: list[str] = []
        for alt in alternatives:
            out.extend(expand_braces(prefix + alt + suffix))
        return out
    return [pattern]


def _has_magic_chars(pattern: str) -> bool:
    if "*" in pattern or "?" in pattern:
        return True
    start = pattern.find("[")
    return start != -1 and pattern.find("]", start + 2) != -1


def has_magic(pattern: str) -> bool:
    """True if `pattern` is a real glob rather than a literal asset name."""
    alternatives = expand_braces(pattern)
    if len(alternatives) > 1:
        return True
    return _has_magic_chars(alternatives[0])


def _match_segment(segment: str, pat: str) -> bool:
    if segment.startswith(".") and not pat.startswith("."):
        return False
    if "[^" in pat:
        pat = pat.replace("[^", "[!")
    return fnmatch.fnmatchcase(segment, pat)


def _match_parts(path_parts: tuple[str, ...], pat_parts: tuple[str, ...]) -> bool:
    @lru_cache(maxsize=None)
    def dp(i: int, j: int) -> bool:
        if j >= len(pat_parts):
            return i >= len(path_parts)

        pat = pat_parts[j]
        if pat == "**":
            if dp(i, j + 1):
                return True
            return i < len(path_parts) and not path_parts[i].startswith(".") and dp(i + 1, j)

        if i >= len(path_parts):
            return False

        return _match_segment(path_parts[i], pat) and dp(i + 1, j + 1)

    return dp(0, 0)


class GlobPattern:
    """A compiled glob; brace groups are expanded once up front."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._alternatives = tuple(tuple(alt.split("/")) for alt in expand_braces(pattern))

    def match(self, path: str) -> bool:
        parts = tuple(path.split("/"))
        return any(_match_parts(parts, alt) for alt in self._alternatives)

    def __repr__(self) -> str:
        return f"GlobPattern({self.pattern!r})"


@lru_cache(maxsize=1024)
def compile_glob(pattern: str) -> GlobPattern | None:
    """Return a matcher for `pattern`, or None when it has no glob magic."""
    if not has_magic(pattern):
        return None
    return GlobPattern(pattern)


def glob_match(path: str, pattern: str) -> bool:
    matcher = compile_glob(pattern)
    if matcher is None:
        return path == pattern
    return matcher.match(path)


def matches_any_glob(name: str, patterns: Sequence[str]) -> bool:
    if not patterns:
        return False
    return any(glob_match(name, pat) for pat in patterns)
