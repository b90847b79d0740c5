"""Line-oriented scan of an article body into typed display blocks"""

import logging
import re
from typing import Optional

from kbrender.core.extract.inline import format_inline
from kbrender.core.models import (
    Block,
    BulletList,
    CodeBlock,
    Heading,
    Image,
    NumberedList,
    Paragraph,
)
from kbrender.core.utils.slug import SLUG_MAX_LENGTH, slugify


logger = logging.getLogger(__name__)

LINE_SPLIT_RE = re.compile(r'\r?\n')
HEADING_PREFIXES = {'# ': 1, '## ': 2, '### ': 3}
FENCE = '```'
BULLET_RE   = re.compile(r'^[-*]\s')
NUMBERED_RE = re.compile(r'^\d+\.\s')
IMAGE_RE    = re.compile(r'^!\[([^\]]*)\]\(([^)]+)\)$')


def split_lines(text: str) -> list[str]:
    """Split a body into lines, tolerating CRLF line endings."""
    return LINE_SPLIT_RE.split(text)


def heading_level(trimmed: str) -> Optional[int]:
    """Return 1-3 for a trimmed line starting with a heading marker, else None."""
    for prefix, level in HEADING_PREFIXES.items():
        if trimmed.startswith(prefix):
            return level
    return None


def is_fence(trimmed: str) -> bool:
    return trimmed.startswith(FENCE)


def _starts_block(trimmed: str) -> bool:
    """True if a trimmed line opens any non-paragraph block."""
    return (
        heading_level(trimmed) is not None
        or is_fence(trimmed)
        or BULLET_RE.match(trimmed) is not None
        or NUMBERED_RE.match(trimmed) is not None
        or IMAGE_RE.match(trimmed) is not None
    )


def _collect_list(lines: list[str], i: int, marker: re.Pattern) -> tuple[list, int]:
    """Collect the contiguous run of marker lines at i; return (items, next index)."""
    items = []
    while i < len(lines) and marker.match(lines[i].strip()):
        items.append(format_inline(marker.sub('', lines[i].strip(), count=1)))
        i += 1
    return items, i


def _collect_fence(lines: list[str], i: int) -> tuple[CodeBlock, int]:
    """Collect a fenced block opening at i; an unterminated fence closes at end of input."""
    language = lines[i].strip()[len(FENCE):].strip() or None
    i += 1
    code_lines = []
    while i < len(lines) and not is_fence(lines[i].strip()):
        code_lines.append(lines[i])
        i += 1
    return CodeBlock(lines=code_lines, language=language), i + 1


def _collect_paragraph(lines: list[str], i: int) -> tuple[Paragraph, int]:
    """Collect the line at i plus following non-blank lines that open no other block."""
    parts = [lines[i].strip()]
    i += 1
    while i < len(lines):
        trimmed = lines[i].strip()
        if not trimmed or _starts_block(trimmed):
            break
        parts.append(trimmed)
        i += 1
    return Paragraph(formatted=format_inline(' '.join(parts))), i


def scan_blocks(text: str, slug_max_length: int = SLUG_MAX_LENGTH) -> list[Block]:
    """Scan an article body into an ordered, flat list of blocks."""
    lines = split_lines(text)
    blocks: list[Block] = []
    i = 0

    while i < len(lines):
        trimmed = lines[i].strip()

        if not trimmed:
            i += 1
            continue

        level = heading_level(trimmed)
        if level is not None:
            title = trimmed[level + 1:].strip()
            blocks.append(Heading(level=level, text=title, id=slugify(title, slug_max_length)))
            i += 1
        elif is_fence(trimmed):
            block, i = _collect_fence(lines, i)
            blocks.append(block)
        elif BULLET_RE.match(trimmed):
            items, i = _collect_list(lines, i, BULLET_RE)
            blocks.append(BulletList(items=items))
        elif NUMBERED_RE.match(trimmed):
            items, i = _collect_list(lines, i, NUMBERED_RE)
            blocks.append(NumberedList(items=items))
        elif m := IMAGE_RE.match(trimmed):
            blocks.append(Image(alt=m.group(1), url=m.group(2)))
            i += 1
        else:
            block, i = _collect_paragraph(lines, i)
            blocks.append(block)

    logger.debug("Scanned %d line(s) into %d block(s)", len(lines), len(blocks))
    return blocks
