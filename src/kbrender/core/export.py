"""Export: safe HTML rendering of blocks, TOC markdown, and per-article output files"""

import json
import re
from html import escape
from pathlib import Path
from urllib.parse import urlsplit

from kbrender.core.models import (
    ArticleContent,
    ArticleView,
    Block,
    Bold,
    BulletList,
    Code,
    CodeBlock,
    FormattedRun,
    Heading,
    Image,
    Italic,
    Link,
    NumberedList,
    Paragraph,
    TOCItem,
)
from kbrender.core.utils.hashing import sha256
from kbrender.core.utils.slug import article_slug


SAFE_SCHEMES = {"", "http", "https", "mailto"}

# Browsers ignore ASCII whitespace and control characters inside a scheme.
_URL_IGNORED_RE = re.compile(r"[\x00-\x20\x7f]")


def is_safe_url(url: str) -> bool:
    """True for relative urls and http, https, or mailto links."""
    try:
        scheme = urlsplit(_URL_IGNORED_RE.sub("", url)).scheme
    except ValueError:
        return False
    return scheme.lower() in SAFE_SCHEMES


def render_runs(runs: list[FormattedRun]) -> str:
    """Render inline runs to HTML; all article text is escaped before tags are added."""
    parts = []
    for run in runs:
        if isinstance(run, Bold):
            parts.append(f"<strong>{escape(run.text)}</strong>")
        elif isinstance(run, Italic):
            parts.append(f"<em>{escape(run.text)}</em>")
        elif isinstance(run, Code):
            parts.append(f"<code>{escape(run.text)}</code>")
        elif isinstance(run, Link) and not is_safe_url(run.url):
            parts.append(escape(run.label))
        elif isinstance(run, Link):
            parts.append(
                f'<a href="{escape(run.url, quote=True)}" target="_blank" '
                f'rel="noopener noreferrer">{escape(run.label)}</a>'
            )
        else:
            parts.append(escape(run.text))
    return "".join(parts)


def render_block(block: Block) -> str:
    """Render a single block to an HTML fragment."""
    if isinstance(block, Heading):
        tag = f"h{block.level}"
        return f'<{tag} id="{escape(block.id, quote=True)}">{escape(block.text)}</{tag}>'
    if isinstance(block, Paragraph):
        return f"<p>{render_runs(block.formatted)}</p>"
    if isinstance(block, (BulletList, NumberedList)):
        tag = "ul" if isinstance(block, BulletList) else "ol"
        items = "".join(f"<li>{render_runs(item)}</li>" for item in block.items)
        return f"<{tag}>{items}</{tag}>"
    if isinstance(block, CodeBlock):
        cls = f' class="language-{escape(block.language, quote=True)}"' if block.language else ""
        code = escape("\n".join(block.lines))
        return f"<pre><code{cls}>{code}</code></pre>"
    if isinstance(block, Image) and not is_safe_url(block.url):
        return f"<p>{escape(block.alt)}</p>"
    if isinstance(block, Image):
        return f'<img src="{escape(block.url, quote=True)}" alt="{escape(block.alt, quote=True)}">'
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def render_html(blocks: list[Block]) -> str:
    """Render a block sequence to an HTML body fragment, one block per line."""
    return "\n".join(render_block(b) for b in blocks)


def render_toc_markdown(toc: list[TOCItem]) -> str:
    """Format TOC items as an indented markdown bullet list of anchor links."""
    return "\n".join(f"{'  ' * (t.level - 1)}- [{t.title}](#{t.id})" for t in toc)


def build_sidecar(article: ArticleContent, view: ArticleView) -> dict:
    """Build the JSON dict: article metadata, content hash, and the render outputs."""
    return {
        "slug": article.slug,
        "title": article.title,
        "category": article.category,
        "tags": article.tags,
        "status": article.status,
        "view_count": article.view_count,
        "content_hash": sha256(article.body),
        **view.model_dump(mode="json"),
    }


def write_article(article: ArticleContent, view: ArticleView, output_dir: Path) -> tuple[Path, Path]:
    """Write <slug>.json and <slug>.html for one article. Returns (json_path, html_path)."""
    output_dir.mkdir(parents=True, exist_ok=True)
    name = article_slug(article.slug) or "article"
    json_path = output_dir / f"{name}.json"
    html_path = output_dir / f"{name}.html"

    json_path.write_text(json.dumps(build_sidecar(article, view), indent=2), encoding='utf-8')
    html_path.write_text(render_html(view.blocks) + "\n", encoding='utf-8')
    return json_path, html_path
