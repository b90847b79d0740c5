"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import TypeAdapter, ValidationError

from kbrender.config import Settings, load_config
from kbrender.core.extract.blocks import scan_blocks
from kbrender.core.extract.summary import summarize
from kbrender.core.extract.toc import extract_toc
from kbrender.core.models import Block, TOCItem
from kbrender.core.parse import load_article
from kbrender.core.pipeline import run_render
from kbrender.core.utils.slug import article_slug


_BLOCKS = TypeAdapter(list[Block])
_TOC = TypeAdapter(list[TOCItem])


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)


def _body(path: str) -> str:
    """Load an article file and return its body (frontmatter stripped)."""
    p = Path(path)
    if not p.is_file():
        _fail(f"Not a file: {path}")
    try:
        return load_article(p).body
    except (OSError, ValueError) as e:
        _fail(f"Could not read {path}", e)


def blocks_cmd(
    path: Annotated[str, typer.Argument(help="Article file")],
    ):
    """Print the article's display blocks as JSON."""
    settings = _settings()
    blocks = scan_blocks(_body(path), settings.slug_max_length)
    typer.echo(_BLOCKS.dump_json(blocks, indent=2).decode())


def toc_cmd(
    path: Annotated[str, typer.Argument(help="Article file")],
    skip_fences: Annotated[Optional[bool], typer.Option("--skip-fences/--no-skip-fences", help="Ignore headings inside code fences")] = None,
    ):
    """Print the article's table of contents as JSON."""
    settings = _settings(overrides={"toc_skip_fences": skip_fences})
    toc = extract_toc(_body(path), settings.toc_skip_fences, settings.slug_max_length)
    typer.echo(_TOC.dump_json(toc, indent=2).decode())


def excerpt_cmd(
    path: Annotated[str, typer.Argument(help="Article file")],
    max_length: Annotated[Optional[int], typer.Option("--max-length", help="Max excerpt characters")] = None,
    ):
    """Print a plain-text excerpt of the article."""
    settings = _settings(overrides={"excerpt_length": max_length})
    typer.echo(summarize(_body(path), settings.excerpt_length))


def render_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ):
    """Render article files to JSON + HTML in the output directory."""
    settings = _settings(overrides={"output_dir": out})
    try:
        results = run_render(path, settings)
    except RuntimeError as e:
        _fail(str(e))
    for src, json_path, html_path in results:
        typer.echo(f"  {src} -> {json_path}, {html_path}")
    typer.echo(f"Rendered {len(results)} article(s) to {settings.output_dir}/")


def slug_cmd(
    title: Annotated[str, typer.Argument(help="Article title")],
    ):
    """Print the URL slug for an article title."""
    typer.echo(article_slug(title))
