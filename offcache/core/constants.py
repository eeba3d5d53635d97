"""Module holding constants used across offcache."""

from .types import Bucket

REST_KEY = ":rest:"
ENTRY_PREFIX = "__offline_"
BUCKETS = tuple(b.value for b in Bucket)
ALL_CACHES = "all"
DEFAULT_SCOPE = "/"
WARNING_PREFIX = "OfflinePlugin:"
DEFAULT_CONFIG_FILE = "offline.json"
DEFAULT_DIST = "dist"
MAX_TOOL_WORKERS = 4
