"""
Block data models for blocktree.

This module defines the flat, graph-shaped document representation that the
transformer walks: a mapping from block identifier to block record, where each
record names its children by identifier.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    """The closed set of block type tags the transformer understands."""

    TEXT = "text"
    TOGGLE = "toggle"
    PAGE = "page"
    BULLETED_LIST = "bulleted_list"
    NUMBERED_LIST = "numbered_list"
    HEADER = "header"
    SUB_HEADER = "sub_header"
    SUB_SUB_HEADER = "sub_sub_header"
    TO_DO = "to_do"
    TABLE_OF_CONTENTS = "table_of_contents"
    DIVIDER = "divider"
    COLUMN_LIST = "column_list"
    COLUMN = "column"
    QUOTE = "quote"
    EQUATION = "equation"
    CODE = "code"
    IMAGE = "image"
    VIDEO = "video"
    CALLOUT = "callout"
    BOOKMARK = "bookmark"
    COLLECTION_VIEW = "collection_view"


class Kind(str, Enum):
    """
    Output-side classification used to select a builder.

    Mostly aligned with BlockType. All header variants collapse into HEADER,
    non-root pages become PAGE_LINK, and anything unrecognised is UNKNOWN.
    """

    TEXT = "text"
    TOGGLE = "toggle"
    PAGE = "page"
    PAGE_LINK = "pageLink"
    BULLETED_LIST = "bulleted_list"
    NUMBERED_LIST = "numbered_list"
    HEADER = "header"
    TO_DO = "to_do"
    TABLE_OF_CONTENTS = "table_of_contents"
    DIVIDER = "divider"
    COLUMN_LIST = "column_list"
    COLUMN = "column"
    QUOTE = "quote"
    EQUATION = "equation"
    CODE = "code"
    IMAGE = "image"
    VIDEO = "video"
    CALLOUT = "callout"
    BOOKMARK = "bookmark"
    COLLECTION_VIEW = "collection_view"
    UNKNOWN = "unknown"


HEADER_LEVELS: Dict[str, int] = {
    BlockType.HEADER.value: 1,
    BlockType.SUB_HEADER.value: 2,
    BlockType.SUB_SUB_HEADER.value: 3,
}


class BlockRecord(BaseModel):
    """
    A single document node.

    The type tag is kept as a plain string so that blocks of types this
    package does not know about still load; the transformer routes those to
    Kind.UNKNOWN.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(
        ...,
        description="Opaque block identifier, unique within the graph"
    )

    type: str = Field(
        ...,
        description="Block type tag (see BlockType)"
    )

    properties: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Rich-text fields keyed by role (title, caption, link, checked, language, source)"
    )

    format: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Presentation hints such as colors, sizing, icons and ratios"
    )

    content: Optional[List[str]] = Field(
        default=None,
        description="Ordered child block identifiers"
    )

    parent_id: Optional[str] = Field(
        default=None,
        description="Identifier of the containing block, page or collection"
    )

    parent_table: Optional[str] = Field(
        default=None,
        description="Table the parent lives in ('block', 'collection' or 'space')"
    )

    collection_id: Optional[str] = Field(
        default=None,
        description="Backing collection, only set on collection_view blocks"
    )

    view_ids: Optional[List[str]] = Field(
        default=None,
        description="Views of the backing collection, only set on collection_view blocks"
    )

    @property
    def block_type(self) -> Optional[BlockType]:
        """The BlockType for this record, or None if the tag is unrecognised."""
        try:
            return BlockType(self.type)
        except ValueError:
            return None

    def get_property(self, name: str) -> Any:
        """Return a raw property value, or None when absent."""
        return (self.properties or {}).get(name)

    def get_format(self, name: str) -> Any:
        """Return a raw format value, or None when absent."""
        return (self.format or {}).get(name)

    def first_property_value(self, name: str) -> Any:
        """
        Return the text of the first span of a rich-text property.

        Rich text is stored as ``[[text, decorations?], ...]``; this returns
        ``text`` of the first span, or None when the property is absent or empty.
        """
        value = self.get_property(name)
        if not value or not value[0]:
            return None
        return value[0][0]


# A document and its descendants, keyed by block identifier
BlockGraph = Dict[str, BlockRecord]
