"""Render orchestration: body -> blocks, TOC, and excerpt; article files -> output files"""

import logging
from pathlib import Path
from typing import Optional

from kbrender.config import Settings
from kbrender.core.export import write_article
from kbrender.core.extract.blocks import scan_blocks
from kbrender.core.extract.summary import summarize
from kbrender.core.extract.toc import extract_toc
from kbrender.core.models import ArticleView
from kbrender.core.parse import discover_files, load_article


logger = logging.getLogger(__name__)


def render_article(body: str, settings: Optional[Settings] = None) -> ArticleView:
    """Run the three independent render operations over one body."""
    settings = settings or Settings()
    return ArticleView(
        blocks=scan_blocks(body, settings.slug_max_length),
        toc=extract_toc(body, settings.toc_skip_fences, settings.slug_max_length),
        excerpt=summarize(body, settings.excerpt_length),
    )


def run_render(path: str, settings: Settings) -> list[tuple[Path, Path, Path]]:
    """Render every article under path into settings.output_dir.

    Returns (source_path, json_path, html_path) triples.
    """
    output_dir = Path(settings.output_dir)
    results = []
    for p in discover_files(Path(path)):
        try:
            article = load_article(p)
        except ValueError as e:
            raise RuntimeError(f"Failed to load {p}: {e}") from e
        view = render_article(article.body, settings)
        json_path, html_path = write_article(article, view, output_dir)
        logger.info("Rendered %s (%d blocks, %d TOC items)", p, len(view.blocks), len(view.toc))
        results.append((p, json_path, html_path))
    return results
