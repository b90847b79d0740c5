"""Markdown stripping into a bounded plain-text excerpt"""

import re

from kbrender.core.extract.blocks import is_fence, split_lines


DEFAULT_MAX_LENGTH = 120
ELLIPSIS = '...'
FALLBACK = 'No description available'

IMAGE_RE       = re.compile(r'!\[[^\]]*\]\([^)]*\)')
HEADING_RE     = re.compile(r'^[ \t]*#{1,6}(?:[ \t]+|$)', re.MULTILINE)
BULLET_RE      = re.compile(r'^[ \t]*[-*](?:[ \t]+|$)', re.MULTILINE)
NUMBERED_RE    = re.compile(r'^[ \t]*\d+\.(?:[ \t]+|$)', re.MULTILINE)
INLINE_CODE_RE = re.compile(r'`([^`]+)`')
BOLD_RE        = re.compile(r'\*\*([^*]+)\*\*')
ITALIC_RE      = re.compile(r'\*([^*]+)\*')
LINK_RE        = re.compile(r'\[([^\]]+)\]\([^)]*\)')
STRAY_MARKER_RE = re.compile(r'[*`]+')
WHITESPACE_RE  = re.compile(r'\s+')

# (pattern, replacement) in application order; later patterns see earlier output.
STRIP_STEPS: list[tuple[re.Pattern, str]] = [
    (IMAGE_RE,        ' '),
    (HEADING_RE,      ''),
    (BULLET_RE,       ''),
    (NUMBERED_RE,     ''),
    (INLINE_CODE_RE,  r'\1'),
    (BOLD_RE,         r'\1'),
    (ITALIC_RE,       r'\1'),
    (LINK_RE,         r'\1'),
    (STRAY_MARKER_RE, ''),
    (WHITESPACE_RE,   ' '),
]


def drop_fences(text: str) -> str:
    """Remove fenced code blocks, fence lines included.

    Fences open and close on lines whose trimmed text starts with the fence
    marker, as in scan_blocks; an unterminated fence runs to end of input.
    """
    kept = []
    in_fence = False
    for line in split_lines(text):
        if is_fence(line.strip()):
            in_fence = not in_fence
        elif not in_fence:
            kept.append(line)
    return '\n'.join(kept)


def strip_markdown(text: str) -> str:
    """Remove all dialect syntax from text, returning a single trimmed line."""
    text = drop_fences(text)
    for pattern, repl in STRIP_STEPS:
        text = pattern.sub(repl, text)
    return text.strip()


def summarize(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Return a plain-text excerpt of at most max_length characters plus an ellipsis."""
    plain = strip_markdown(text)
    if not plain:
        return FALLBACK
    if len(plain) > max_length:
        return plain[:max_length] + ELLIPSIS
    return plain
