import pytest

from offcache.core.glob import compile_glob, expand_braces, glob_match, has_magic, matches_any_glob


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("*.js", True),
        ("js/**", True),
        ("?.css", True),
        ("img/[ab].png", True),
        ("{app,vendor}.js", True),
        ("app.js", False),
        ("{app}.js", False),
        ("a[b.js", False),
        ("https://cdn.example.com/lib.js", False),
    ],
)
def test_has_magic(pattern, expected):
    assert has_magic(pattern) is expected


def test_literal_pattern_does_not_compile():
    assert compile_glob("app.js") is None
    assert compile_glob("*.js") is not None


def test_expand_braces_nested_and_sequential():
    assert expand_braces("js/{app,vendor}.{js,css}") == [
        "js/app.js",
        "js/app.css",
        "js/vendor.js",
        "js/vendor.css",
    ]
    assert expand_braces("{a,{b,c}}.txt") == ["a.txt", "b.txt", "c.txt"]


def test_expand_braces_ranges():
    assert expand_braces("img/{1..3}.png") == ["img/1.png", "img/2.png", "img/3.png"]
    assert expand_braces("{c..a}") == ["c", "b", "a"]


def test_star_does_not_cross_directories():
    assert glob_match("app.js", "*.js")
    assert not glob_match("js/app.js", "*.js")
    assert glob_match("js/app.js", "*/*.js")


def test_globstar_matches_any_depth():
    assert glob_match("app.js", "**/*.js")
    assert glob_match("a/b/c.js", "**/*.js")
    assert glob_match("js/app.js.map", "**/*.map")
    assert not glob_match("js/app.js", "**/*.map")


def test_dot_segments_need_explicit_dot():
    assert not glob_match(".htaccess", "*")
    assert glob_match(".htaccess", ".*")
    assert not glob_match(".well-known/x.json", "**/*.json")


def test_character_classes():
    assert glob_match("bpp.js", "[^a]pp.js")
    assert not glob_match("app.js", "[^a]pp.js")
    assert glob_match("img/b.png", "img/[ab].png")
    assert glob_match("a.js", "?.js")
    assert not glob_match("ab.js", "?.js")


def test_brace_alternatives_match():
    assert glob_match("css/site.css", "{js,css}/*")
    assert not glob_match("img/logo.png", "{js,css}/*")


def test_matches_any_glob():
    assert matches_any_glob("app.js.map", ["*.map", "*.txt"])
    assert matches_any_glob("app.js", ["app.js"])
    assert not matches_any_glob("app.js", [])


def test_oversized_range_stays_literal():
    assert expand_braces("{1..100000000}.js") == ["{1..100000000}.js"]
    assert not has_magic("{1..100000000}.js")
    assert len(expand_braces("{1..999}")) == 999
