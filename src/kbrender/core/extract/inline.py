"""Inline tokenization of bold, italic, code, and link markers into formatted runs"""

import re
from typing import Callable

from kbrender.core.models import Bold, Code, FormattedRun, Italic, Link, Text


CODE_RE   = re.compile(r'`([^`]+)`')
LINK_RE   = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
BOLD_RE   = re.compile(r'\*\*([^*]+)\*\*')
ITALIC_RE = re.compile(r'\*([^*]+)\*')

# Applied in order, each pass only over literal Text runs left by the previous ones.
# Code first keeps asterisks inside spans literal; bold must precede italic.
PASSES: list[tuple[re.Pattern, Callable[[re.Match], FormattedRun]]] = [
    (CODE_RE,   lambda m: Code(text=m.group(1))),
    (LINK_RE,   lambda m: Link(label=m.group(1), url=m.group(2))),
    (BOLD_RE,   lambda m: Bold(text=m.group(1))),
    (ITALIC_RE, lambda m: Italic(text=m.group(1))),
]


def _split(text: str, pattern: re.Pattern, make: Callable[[re.Match], FormattedRun]) -> list[FormattedRun]:
    """Split one literal string on pattern matches; empty literals are dropped."""
    runs: list[FormattedRun] = []
    pos = 0
    for m in pattern.finditer(text):
        if m.start() > pos:
            runs.append(Text(text=text[pos:m.start()]))
        runs.append(make(m))
        pos = m.end()
    if pos < len(text):
        runs.append(Text(text=text[pos:]))
    return runs


def format_inline(text: str) -> list[FormattedRun]:
    """Convert one line of paragraph or list-item text to an ordered run sequence."""
    runs: list[FormattedRun] = [Text(text=text)] if text else []
    for pattern, make in PASSES:
        runs = [
            out
            for run in runs
            for out in (_split(run.text, pattern, make) if isinstance(run, Text) else [run])
        ]
    return runs
