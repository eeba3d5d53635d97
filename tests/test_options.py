import pytest
from pydantic import ValidationError

from offcache.config.options import OfflineOptions, deep_extend


def test_defaults():
    opts = OfflineOptions()
    assert opts.simplified
    assert opts.scope == "/"
    assert opts.update_strategy.value == "all"
    assert list(opts.tool_options()) == ["ServiceWorker", "AppCache"]
    assert opts.app_cache["caches"] == ["main", "additional"]


def test_tool_blocks_deep_merge_into_defaults():
    opts = OfflineOptions.model_validate({"AppCache": {"directory": "cache/", "FALLBACK": {"/": "/offline"}}})
    assert opts.app_cache["directory"] == "cache/"
    assert opts.app_cache["NETWORK"] == "*"
    assert opts.app_cache["FALLBACK"] == {"/": "/offline"}
    assert opts.service_worker["output"] == "sw.js"


def test_tool_blocks_can_be_disabled():
    opts = OfflineOptions.model_validate({"ServiceWorker": False, "app_cache": True})
    assert list(opts.tool_options()) == ["AppCache"]
    assert opts.app_cache["NETWORK"] == "*"


def test_loose_shapes_are_coerced():
    opts = OfflineOptions.model_validate(
        {"caches": {"main": "app.js", "additional": ["x.js"]}, "externals": "cdn.js", "excludes": None}
    )
    assert opts.caches.main == []
    assert opts.caches.additional == ["x.js"]
    assert opts.externals == []
    assert opts.excludes == []


def test_caches_none_means_all():
    assert OfflineOptions.model_validate({"caches": None}).simplified


def test_snake_and_camel_case():
    a = OfflineOptions.model_validate({"relativePaths": True, "updateStrategy": "hash"})
    b = OfflineOptions.model_validate({"relative_paths": True, "update_strategy": "hash"})
    assert a.relative_paths and b.relative_paths
    assert a.update_strategy == b.update_strategy


def test_bad_strategy_is_validation_error():
    with pytest.raises(ValidationError):
        OfflineOptions.model_validate({"updateStrategy": "never"})


def test_deep_extend_does_not_mutate_base():
    base = {"a": {"b": 1, "c": [1]}, "d": 2}
    out = deep_extend(base, {"a": {"c": [2]}, "e": 3})
    assert out == {"a": {"b": 1, "c": [2]}, "d": 2, "e": 3}
    assert base == {"a": {"b": 1, "c": [1]}, "d": 2}
