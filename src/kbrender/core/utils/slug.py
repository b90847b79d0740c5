"""Slug generation for heading anchors and article identifiers"""

import re


SLUG_MAX_LENGTH = 50

_NON_SLUG_RE = re.compile(r'[^\w\s-]')
_WHITESPACE_RE = re.compile(r'\s+')
_NON_ALNUM_RE = re.compile(r'[^a-z0-9]+')


def slugify(text: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Convert heading text to an anchor id shared by blocks and the TOC.

    Duplicate headings produce duplicate ids; callers needing unique anchors
    must disambiguate themselves.
    """
    text = text.lower()
    text = _NON_SLUG_RE.sub('', text)
    text = _WHITESPACE_RE.sub('-', text)
    return text[:max_length]


def article_slug(title: str) -> str:
    """Convert an article title to a lowercase, hyphen-separated URL slug."""
    return _NON_ALNUM_RE.sub('-', title.lower()).strip('-')
