"""Article file discovery and YAML frontmatter loading"""

import re
from pathlib import Path
from typing import Any

import yaml

from kbrender.core.article import parse_tags
from kbrender.core.models import ArticleContent
from kbrender.core.utils.slug import article_slug


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def article_from_text(text: str, stem: str = 'article') -> ArticleContent:
    """Build an ArticleContent from raw file text; stem is the slug of last resort."""
    fm, body = _strip_frontmatter(text)
    title = str(fm.get('title') or '')
    tags = fm.get('tags') or []
    if isinstance(tags, str):
        tags = parse_tags(tags)
    return ArticleContent(
        slug=fm.get('slug') or article_slug(title) or article_slug(stem) or 'article',
        title=title,
        body=body,
        category=fm.get('category'),
        tags=[str(t) for t in tags],
        status=fm.get('status', 'draft'),
        view_count=fm.get('view_count', 0),
    )


def load_article(path: Path) -> ArticleContent:
    """Read a single article file, frontmatter included."""
    article = article_from_text(path.read_text(encoding='utf-8'), path.stem)
    article.path = str(path)
    return article
