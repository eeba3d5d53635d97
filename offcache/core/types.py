"""Small types and Enums used by offcache."""

from enum import Enum


class UpdateStrategy(str, Enum):
    """How downstream tools decide which cached entries to refresh."""

    all = "all"
    hash = "hash"
    changed = "changed"


class Bucket(str, Enum):
    """Cache buckets, in processing order."""

    main = "main"
    additional = "additional"
    optional = "optional"
