import pytest


@pytest.fixture(scope="module")
def data():
    return [
        # pattern, low score, high score
        ("ff", "fuzzyfinder", "fuzzy-finder"),
        ("ff", "fuzzy-blurry-finder", "fuzzy-finder"),
        ("br", "foob-r", "fo-bar"),
        ("oob", "foobar", "out-of-bound"),
        ("b", "foo-bar", "foo bar"),
    ]


@pytest.fixture
def lines():
    return [
        "fuzzyfinder",
        "fuzzy-finder",
        "xyz",
        "fuzzy-blurry-finder",
    ]
