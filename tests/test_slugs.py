import pytest

from doctrine.utils.slugs import SlugCounter, classify_target, resolve_relative, slugify


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Naming", "naming"),
        ("Error Handling & Logging", "error-handling--logging"),
        ("`snake_case` names", "snake_case-names"),
        ("See [Axum](axum.md) docs", "see-axum-docs"),
        ("**Bold** Rules", "bold-rules"),
    ],
)
def test_slugify(title, expected):
    assert slugify(title) == expected


def test_slug_counter_deduplicates():
    counter = SlugCounter()
    assert [counter.unique("Usage") for _ in range(3)] == ["usage", "usage-1", "usage-2"]
    assert counter.unique("Other") == "other"


def test_classify_target():
    assert classify_target("https://example.com/x") == ("external", None, None)
    assert classify_target("mailto:team@example.com") == ("mailto", None, None)
    assert classify_target("#naming") == ("anchor", None, "naming")
    assert classify_target("guide.md#sec") == ("relative", "guide.md", "sec")
    assert classify_target("my%20guide.md") == ("relative", "my guide.md", None)


def test_resolve_relative():
    assert resolve_relative("frameworks/fastapi.md", "../languages/python.md") == (
        "languages/python.md"
    )
    assert resolve_relative("frameworks/fastapi.md", "axum.md") == "frameworks/axum.md"
    assert resolve_relative("frameworks/fastapi.md", "/languages/rust.md") == (
        "languages/rust.md"
    )
    assert resolve_relative("frameworks/fastapi.md", "../../outside.md") is None
