"""Tests for human-readable sizes."""

import pytest

from bundlescope.formatting import format_size


@pytest.mark.parametrize(
    "size,expected",
    [
        (None, "0 B"),
        (0, "0 B"),
        (1, "1 B"),
        (1000, "1000 B"),
        (1023, "1023 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1024 * 1024, "1 MB"),
        (5 * 1024**3, "5 GB"),
        (1024 * 1024 - 1, "1 MB"),
        (123456, "120.56 KB"),
        (-2048, "-2 KB"),
    ],
)
def test_format_size(size, expected):
    assert format_size(size) == expected


def test_precision():
    assert format_size(1536, precision=0) == "2 KB"
