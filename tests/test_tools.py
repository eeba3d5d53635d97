import threading

import pytest

from offcache.core.errors import ToolError
from offcache.core.tools import ToolConfig, run_tools

TOOLS = [ToolConfig("ServiceWorker"), ToolConfig("AppCache", {"caches": ["main"]})]


def test_results_follow_declaration_order():
    assert run_tools(TOOLS, lambda tool: tool.name.lower()) == {
        "ServiceWorker": "serviceworker",
        "AppCache": "appcache",
    }


def test_failure_waits_for_all_then_raises():
    done = []
    lock = threading.Lock()

    def fn(tool):
        if tool.name == "ServiceWorker":
            raise ValueError("bad template")
        with lock:
            done.append(tool.name)
        return True

    with pytest.raises(ToolError) as exc_info:
        run_tools(TOOLS, fn)
    assert exc_info.value.tool == "ServiceWorker"
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert done == ["AppCache"]


def test_no_tools():
    assert run_tools([], lambda tool: 1) == {}


def test_tool_caches():
    assert TOOLS[0].caches is None
    assert TOOLS[1].caches == ["main"]
