"""Tests for Redis-style glob matching."""

import pytest

from cacheaside.utils.patterns import glob_match


@pytest.mark.parametrize(
    ("pattern", "key", "expected"),
    [
        ("products*", "products:/api", True),
        ("products*", "products_paginated:/api?page=1", True),
        ("products*", "product:/api/1", False),
        ("*", "anything", True),
        ("*", "", True),
        ("product?", "products", True),
        ("product?", "product", False),
        ("h[ae]llo", "hallo", True),
        ("h[ae]llo", "hillo", False),
        ("h[^e]llo", "hallo", True),
        ("h[^e]llo", "hello", False),
        ("h[a-c]llo", "hbllo", True),
        ("a\\*b", "a*b", True),
        ("a\\*b", "axb", False),
        ("a.b", "axb", False),
        ("shop:products*", "shop:products:/x", True),
        ("shop:products*", "other:products:/x", False),
        ("line*", "line1\nline2", True),
    ],
)
def test_glob_match(pattern: str, key: str, expected: bool) -> None:
    assert glob_match(pattern, key) is expected
