"""Unit tests for core/article.py"""

import pytest

from kbrender.core.article import append_image, image_markdown, parse_tags
from kbrender.core.extract.blocks import scan_blocks
from kbrender.core.models import Image


@pytest.mark.parametrize("raw,expected", [
    ("password, reset, account", ["password", "reset", "account"]),
    ("  one  ,, two ,", ["one", "two"]),
    ("", []),
])
def test_parse_tags(raw, expected):
    assert parse_tags(raw) == expected


def test_image_markdown():
    assert image_markdown("shot.png", "https://cdn/x.png") == "![shot.png](https://cdn/x.png)"


def test_append_image_scans_as_image_block():
    """An appended image becomes its own Image block."""
    body = append_image("Intro text.", "shot.png", "https://cdn/x.png")
    assert body == "Intro text.\n\n![shot.png](https://cdn/x.png)"
    assert scan_blocks(body)[-1] == Image(alt="shot.png", url="https://cdn/x.png")
