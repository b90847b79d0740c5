"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated, Optional

import typer

from kbrender.cli.commands import _settings, blocks_cmd, excerpt_cmd, render_cmd, slug_cmd, toc_cmd
from kbrender.utils.logging_config import setup_logging


app = typer.Typer(name="kbrender", no_args_is_help=True, help="Knowledge-base article rendering engine")


@app.callback()
def main(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")] = None,
    ):
    """Render knowledge-base article bodies into blocks, a TOC, and excerpts."""
    settings = _settings(overrides={"log_level": log_level.upper() if log_level else None})
    setup_logging(settings.log_level)


app.command(name="blocks")(blocks_cmd)
app.command(name="toc")(toc_cmd)
app.command(name="excerpt")(excerpt_cmd)
app.command(name="render")(render_cmd)
app.command(name="slug")(slug_cmd)
