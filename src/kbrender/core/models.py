"""Output models for the block scan, TOC, and excerpt operations"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


# --- inline runs ---

class Text(BaseModel):
    kind: Literal['text'] = 'text'
    text: str


class Bold(BaseModel):
    kind: Literal['bold'] = 'bold'
    text: str


class Italic(BaseModel):
    kind: Literal['italic'] = 'italic'
    text: str


class Code(BaseModel):
    kind: Literal['code'] = 'code'
    text: str


class Link(BaseModel):
    kind: Literal['link'] = 'link'
    label: str
    url: str


FormattedRun = Annotated[Union[Text, Bold, Italic, Code, Link], Field(discriminator='kind')]


# --- blocks ---

class Heading(BaseModel):
    kind: Literal['heading'] = 'heading'
    level: int = Field(..., ge=1, le=3)
    text: str
    id: str                         # navigation anchor, see core/utils/slug.py


class Paragraph(BaseModel):
    kind: Literal['paragraph'] = 'paragraph'
    formatted: list[FormattedRun]


class BulletList(BaseModel):
    kind: Literal['bullet_list'] = 'bullet_list'
    items: list[list[FormattedRun]]


class NumberedList(BaseModel):
    kind: Literal['numbered_list'] = 'numbered_list'
    items: list[list[FormattedRun]]


class CodeBlock(BaseModel):
    kind: Literal['code'] = 'code'
    lines: list[str]                # verbatim, never inline-formatted
    language: Optional[str] = None  # info string after the opening fence


class Image(BaseModel):
    kind: Literal['image'] = 'image'
    alt: str
    url: str


Block = Annotated[
    Union[Heading, Paragraph, BulletList, NumberedList, CodeBlock, Image],
    Field(discriminator='kind'),
]


class TOCItem(BaseModel):
    """A heading anchor for in-page navigation."""
    level: int = Field(..., ge=1, le=3)
    title: str
    id: str


class ArticleView(BaseModel):
    """The three render outputs for one article body."""
    blocks: list[Block] = []
    toc: list[TOCItem] = []
    excerpt: str


class ArticleContent(BaseModel):
    """An article body plus store-owned metadata, passed in by value."""
    slug: str
    title: str = ''
    body: str
    category: Optional[str] = None
    tags: list[str] = []
    status: str = 'draft'
    view_count: int = 0
    path: Optional[str] = None      # source file, when loaded from disk
