"""
Extracted content models for blocktree.

Each model is the ``content`` argument handed to a builder for one output
kind. Text and toggle blocks receive a bare list of TextSpan instead, and
table_of_contents blocks receive a list of TocEntry.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class TextSpan(BaseModel):
    """One run of text together with its decorations."""

    text: str
    decorations: List[Any] = Field(default_factory=list)


class PageLinkContent(BaseModel):
    title: Optional[str] = None
    icon: Optional[str] = None


class HeaderContent(BaseModel):
    text: List[TextSpan]
    level: int = Field(..., ge=1, le=3, description="1 for header, 2 for sub_header, 3 for sub_sub_header")


class ListContent(BaseModel):
    text: List[TextSpan]
    start: int = Field(..., description="Number of this item within its run of same-type siblings")
    color: Optional[str] = None


class TodoContent(BaseModel):
    text: List[TextSpan]
    checked: bool = False


class TocEntry(BaseModel):
    """A header surfaced by a table_of_contents block."""

    id: str
    level: int
    text: List[TextSpan]


class ColumnContent(BaseModel):
    ratio: float = 0.5


class QuoteContent(BaseModel):
    text: List[TextSpan]
    color: Optional[str] = None


class EquationContent(BaseModel):
    math: Optional[str] = Field(None, description="Raw first title value, not flattened")


class CodeContent(BaseModel):
    text: List[TextSpan]
    language: Optional[str] = None


class MediaContent(BaseModel):
    """Content for image and video blocks."""

    aspect_ratio: Optional[float] = None
    height: Optional[float] = None
    width: Optional[float] = None
    full_width: Optional[bool] = None
    page_width: Optional[bool] = None
    preserve_scale: Optional[bool] = None
    src: Optional[str] = None
    caption: List[TextSpan] = Field(default_factory=list)


class CalloutContent(BaseModel):
    text: List[TextSpan]
    icon: Optional[str] = None
    color: Optional[str] = None


class BookmarkContent(BaseModel):
    link: str
    title: str = ""
    desc: str = ""
    favicon: Optional[str] = None
    thumbnail: Optional[str] = None
    color: Optional[str] = None


class CollectionViewContent(BaseModel):
    collection_id: Optional[str] = None
    view_ids: Optional[List[str]] = None
