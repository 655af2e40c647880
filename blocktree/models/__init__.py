"""Data models for blocktree."""

from .blocks import BlockType, Kind, BlockRecord, BlockGraph, HEADER_LEVELS
from .content import (
    TextSpan,
    PageLinkContent,
    HeaderContent,
    ListContent,
    TodoContent,
    TocEntry,
    ColumnContent,
    QuoteContent,
    EquationContent,
    CodeContent,
    MediaContent,
    CalloutContent,
    BookmarkContent,
    CollectionViewContent,
)

__all__ = [
    "BlockType",
    "Kind",
    "BlockRecord",
    "BlockGraph",
    "HEADER_LEVELS",
    "TextSpan",
    "PageLinkContent",
    "HeaderContent",
    "ListContent",
    "TodoContent",
    "TocEntry",
    "ColumnContent",
    "QuoteContent",
    "EquationContent",
    "CodeContent",
    "MediaContent",
    "CalloutContent",
    "BookmarkContent",
    "CollectionViewContent",
]
