"""Unit tests for core/pipeline.py"""

import json

import pytest

from kbrender.config import Settings
from kbrender.core.models import ArticleView, Heading, TOCItem
from kbrender.core.pipeline import render_article, run_render


def test_render_article_outputs(sample_md):
    """render_article bundles blocks, TOC, and excerpt."""
    view = render_article(sample_md)
    assert isinstance(view, ArticleView)
    assert view.blocks[0] == Heading(level=1, text="Getting Started", id="getting-started")
    assert view.toc[0] == TOCItem(level=1, title="Getting Started", id="getting-started")
    assert view.excerpt.startswith("Getting Started A paragraph with bold text")


def test_render_article_fence_policy(sample_md):
    """The default TOC lists the fenced '# not a heading' line; toc_skip_fences drops it."""
    default = render_article(sample_md)
    skipped = render_article(sample_md, Settings(toc_skip_fences=True))
    assert "not a heading" in [t.title for t in default.toc]
    assert "not a heading" not in [t.title for t in skipped.toc]


def test_render_article_excerpt_length():
    """excerpt_length bounds the excerpt."""
    view = render_article("word " * 100, Settings(excerpt_length=10))
    assert view.excerpt == "word word ..."


def test_render_article_empty():
    """An empty body renders to empty blocks and TOC with the fallback excerpt."""
    view = render_article("")
    assert view.blocks == []
    assert view.toc == []
    assert view.excerpt == "No description available"


def test_render_article_json_round_trip(sample_md):
    """The view validates back from its own JSON dump."""
    view = render_article(sample_md)
    assert ArticleView.model_validate_json(view.model_dump_json()) == view


def test_run_render_writes_outputs(tmp_path):
    """run_render writes one JSON and one HTML file per article."""
    src = tmp_path / "kb"
    src.mkdir()
    (src / "vpn.md").write_text("---\ntitle: VPN Setup\n---\n# Connect\n\nUse **the** client.\n")
    settings = Settings(output_dir=str(tmp_path / "dist"))

    results = run_render(str(src), settings)

    assert len(results) == 1
    _, json_path, html_path = results[0]
    assert json_path.name == "vpn-setup.json"
    data = json.loads(json_path.read_text())
    assert data["toc"] == [{"level": 1, "title": "Connect", "id": "connect"}]
    assert data["excerpt"] == "Connect Use the client."
    assert '<h1 id="connect">Connect</h1>' in html_path.read_text()


def test_run_render_bad_frontmatter(tmp_path):
    """A file with invalid frontmatter raises RuntimeError naming the file."""
    (tmp_path / "bad.md").write_text("---\nkey: [unclosed\n---\nbody\n")
    with pytest.raises(RuntimeError, match="bad.md"):
        run_render(str(tmp_path), Settings(output_dir=str(tmp_path / "out")))
