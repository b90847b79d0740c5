"""Table-of-contents extraction from heading lines"""

import logging

from kbrender.core.extract.blocks import heading_level, is_fence, split_lines
from kbrender.core.models import TOCItem
from kbrender.core.utils.slug import SLUG_MAX_LENGTH, slugify


logger = logging.getLogger(__name__)


def extract_toc(
    text: str,
    skip_fences: bool = False,
    slug_max_length: int = SLUG_MAX_LENGTH,
    ) -> list[TOCItem]:
    """Return one TOCItem per heading line, in document order.

    By default fences are not tracked, so heading-like lines inside a code
    block are listed too (unlike scan_blocks). Pass skip_fences=True to
    ignore them.
    """
    items: list[TOCItem] = []
    in_fence = False

    for line in split_lines(text):
        trimmed = line.strip()
        if skip_fences and is_fence(trimmed):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        level = heading_level(trimmed)
        if level is not None:
            title = trimmed[level + 1:].strip()
            items.append(TOCItem(level=level, title=title, id=slugify(title, slug_max_length)))

    logger.debug("Extracted %d TOC item(s)", len(items))
    return items
