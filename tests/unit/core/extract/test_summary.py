"""Unit tests for core/extract/summary.py"""

import pytest

from kbrender.core.extract.summary import FALLBACK, strip_markdown, summarize


def test_truncation_at_max_length():
    """500 plain characters truncate to exactly 120 plus an ellipsis."""
    excerpt = summarize("x" * 500, max_length=120)
    assert excerpt == "x" * 120 + "..."


def test_default_max_length_is_120():
    """The default excerpt length is 120 characters."""
    assert summarize("y" * 121) == "y" * 120 + "..."


def test_short_text_is_not_truncated():
    """Text at or under the limit is returned unchanged."""
    assert summarize("x" * 120) == "x" * 120


@pytest.mark.parametrize("body", [
    "",
    "   \n  ",
    "```\ncode only\n```",
    "```\nunterminated fence",
    "![](https://x.io/a.png)",
    "```js\nx()\n```\n\n![img](a.png)\n",
    "#",
    "## ",
    "-",
    "*",
    "1.",
    "**",
    "****",
    "``",
    "# \n- \n**\n",
])
def test_fallback_when_nothing_remains(body):
    """Input with no literal text yields the fallback string."""
    assert summarize(body) == FALLBACK == "No description available"


def test_strip_markdown_full():
    """All dialect syntax is removed, keeping inner text and link labels."""
    body = (
        "# Title\n\n"
        "Some *italic* and **bold** with `code`.\n\n"
        "- first item\n"
        "2. numbered\n\n"
        "```\nhidden()\n```\n"
        "![alt](img.png)\n"
        "Read [the guide](https://x.io/guide)."
    )
    assert strip_markdown(body) == (
        "Title Some italic and bold with code. first item numbered Read the guide."
    )


def test_list_markers_stripped_before_emphasis():
    """A bullet marker does not pair with a later italic marker."""
    assert strip_markdown("* item with *em*") == "item with em"


def test_whitespace_collapsed():
    """Newlines and runs of spaces become single spaces."""
    assert strip_markdown("a\n\n\tb   c") == "a b c"


def test_summarize_is_idempotent(sample_md):
    assert summarize(sample_md) == summarize(sample_md)


def test_fence_closes_only_on_fence_line():
    """A fence marker inside a code line does not close the fence."""
    body = 'Intro.\n```\necho "```" secret_code()\n```\n'
    assert summarize(body) == "Intro."


def test_indented_fence_lines_are_removed():
    """Fence lines are recognized after trimming, like the block scanner."""
    assert strip_markdown("before\n  ```sh\n  ls -la\n  ```\nafter") == "before after"


def test_inline_fence_markers_keep_text():
    """Backtick runs inside a paragraph line do not swallow the text between them."""
    assert strip_markdown("Use ```x``` here and ``` there") == "Use x here and there"


def test_empty_marker_pairs_removed():
    """Emphasis markers with nothing inside do not survive into the excerpt."""
    assert strip_markdown("Hello **** world **") == "Hello world"
