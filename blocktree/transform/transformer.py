"""
Block graph transformer for blocktree.

This module walks a flat block graph from a root identifier and builds an
output tree through a caller-supplied rule set. Each block type has its own
content extraction; pages below the root collapse into page links, and
table_of_contents blocks look up the headers of their top-level page instead
of reading their own children.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from ..exceptions import CyclicGraphError, MalformedBlockError
from ..models import (
    HEADER_LEVELS,
    BlockGraph,
    BlockRecord,
    BlockType,
    BookmarkContent,
    CalloutContent,
    CodeContent,
    CollectionViewContent,
    ColumnContent,
    EquationContent,
    HeaderContent,
    Kind,
    ListContent,
    MediaContent,
    PageLinkContent,
    QuoteContent,
    TextSpan,
    TocEntry,
    TodoContent,
)
from ..utils import find_list_index, get_text_content, get_top_level_page_block, join_text, map_image_url
from .rules import RuleSet, TransformationRules

T = TypeVar("T")

TextContentFn = Callable[[Any], List[TextSpan]]
MapImageURLFn = Callable[[Optional[str], BlockRecord], Optional[str]]
FindListIndexFn = Callable[[str, BlockGraph], int]
TopLevelPageFn = Callable[[BlockRecord, BlockGraph], Optional[BlockRecord]]

# Kinds whose blocks are transformed together with their children
RECURSIVE_KINDS = frozenset({
    Kind.TOGGLE,
    Kind.PAGE,
    Kind.BULLETED_LIST,
    Kind.NUMBERED_LIST,
    Kind.TO_DO,
    Kind.COLUMN_LIST,
    Kind.COLUMN,
})

DEFAULT_COLUMN_RATIO = 0.5


class BlockTransformer(Generic[T]):
    """
    Transforms a block graph into an output tree of ``T``.

    The four collaborators default to the implementations in blocktree.utils
    and can be replaced per transformer.
    """

    def __init__(
        self,
        rules: TransformationRules,
        text_content: TextContentFn = get_text_content,
        map_image_url: MapImageURLFn = map_image_url,
        find_list_index: FindListIndexFn = find_list_index,
        get_top_level_page_block: TopLevelPageFn = get_top_level_page_block,
    ):
        """
        Initialize the transformer.

        Args:
            rules: Builders keyed by output kind
            text_content: Flattens a rich-text property into spans
            map_image_url: Resolves the display URL of image and video sources
            find_list_index: Computes the start number of a list item
            get_top_level_page_block: Finds the top-level page enclosing a block
        """
        self.rules: RuleSet[T] = RuleSet.coerce(rules)
        self.text_content = text_content
        self.map_image_url = map_image_url
        self.find_list_index = find_list_index
        self.get_top_level_page_block = get_top_level_page_block

        self._extractors: Dict[BlockType, Callable[[BlockRecord, Kind, BlockGraph], Any]] = {
            BlockType.TEXT: self._extract_text,
            BlockType.TOGGLE: self._extract_text,
            BlockType.PAGE: self._extract_page,
            BlockType.BULLETED_LIST: self._extract_list,
            BlockType.NUMBERED_LIST: self._extract_list,
            BlockType.HEADER: self._extract_header,
            BlockType.SUB_HEADER: self._extract_header,
            BlockType.SUB_SUB_HEADER: self._extract_header,
            BlockType.TO_DO: self._extract_to_do,
            BlockType.TABLE_OF_CONTENTS: self._extract_table_of_contents,
            BlockType.DIVIDER: self._extract_nothing,
            BlockType.COLUMN_LIST: self._extract_nothing,
            BlockType.COLUMN: self._extract_column,
            BlockType.QUOTE: self._extract_quote,
            BlockType.EQUATION: self._extract_equation,
            BlockType.CODE: self._extract_code,
            BlockType.IMAGE: self._extract_media,
            BlockType.VIDEO: self._extract_media,
            BlockType.CALLOUT: self._extract_callout,
            BlockType.BOOKMARK: self._extract_bookmark,
            BlockType.COLLECTION_VIEW: self._extract_collection_view,
        }

    @property
    def handled_types(self) -> List[BlockType]:
        """Block types with a content extractor."""
        return list(self._extractors.keys())

    def transform(self, graph: BlockGraph, block_id: str, is_top_level: bool = True) -> Optional[T]:
        """
        Transform the block ``block_id`` and its descendants.

        Args:
            graph: The block graph to read from
            block_id: Identifier of the block to start at
            is_top_level: Whether the block is the document root; a page that is
                not top-level becomes a page link instead of being expanded

        Returns:
            The built output node, or None when the block is missing from the
            graph or no rule is registered for its kind

        Raises:
            CyclicGraphError: If a block is reachable from itself
            MalformedBlockError: If a block lacks a field its type requires
        """
        return self._transform(graph, block_id, is_top_level, ())

    def resolve_kind(self, block: BlockRecord, is_top_level: bool = True) -> Kind:
        """
        Determine the output kind of a block.

        Args:
            block: The block record
            is_top_level: Whether the block is the document root

        Returns:
            The Kind used to select the block's builder
        """
        block_type = block.block_type
        if block_type is None:
            return Kind.UNKNOWN
        if block_type is BlockType.PAGE and not is_top_level:
            return Kind.PAGE_LINK
        if block.type in HEADER_LEVELS:
            return Kind.HEADER
        return Kind(block_type.value)

    def _transform(self, graph: BlockGraph, block_id: str, is_top_level: bool,
                   path: Tuple[str, ...]) -> Optional[T]:
        if block_id in path:
            raise CyclicGraphError(block_id, path)

        block = graph.get(block_id)
        if block is None:
            logging.debug(f"Block {block_id} is not in the graph, skipping")
            return None

        kind = self.resolve_kind(block, is_top_level)

        content = None
        extractor = self._extractors.get(block.block_type) if kind is not Kind.UNKNOWN else None
        if extractor is not None:
            content = extractor(block, kind, graph)
        else:
            logging.debug(f"Block {block_id} has unknown type '{block.type}'")

        children: Optional[List[T]] = None
        if kind in RECURSIVE_KINDS and block.content is not None:
            child_path = path + (block_id,)
            children = [
                child for child in (
                    self._transform(graph, child_id, False, child_path) for child_id in block.content
                )
                if child is not None
            ]

        builder = self.rules.get(kind)
        if builder is None:
            logging.debug(f"No rule registered for kind '{kind.value}', skipping block {block_id}")
            return None

        return builder(block_id, content, children)

    # Content extraction, one method per block type family

    def _extract_nothing(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> None:
        return None

    def _extract_text(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> List[TextSpan]:
        return self.text_content(block.get_property("title"))

    def _extract_page(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> Optional[PageLinkContent]:
        if kind is not Kind.PAGE_LINK:
            return None
        return PageLinkContent(
            title=block.first_property_value("title"),
            icon=block.get_format("page_icon"),
        )

    def _extract_list(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> ListContent:
        return ListContent(
            text=self.text_content(block.get_property("title")),
            start=self.find_list_index(block.id, graph),
            color=block.get_format("block_color"),
        )

    def _extract_header(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> HeaderContent:
        return HeaderContent(
            text=self.text_content(block.get_property("title")),
            level=HEADER_LEVELS[block.type],
        )

    def _extract_to_do(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> TodoContent:
        return TodoContent(
            text=self.text_content(block.get_property("title")),
            checked=block.first_property_value("checked") == "Yes",
        )

    def _extract_table_of_contents(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> List[TocEntry]:
        page = self.get_top_level_page_block(block, graph)
        if page is None:
            logging.warning(f"Table of contents {block.id} has no enclosing page, leaving it empty")
            return []

        entries: List[TocEntry] = []
        for child_id in page.content or []:
            child = graph.get(child_id)
            if child is None or child.type not in HEADER_LEVELS:
                continue
            entries.append(TocEntry(
                id=child_id,
                level=HEADER_LEVELS[child.type],
                text=self.text_content(child.get_property("title")),
            ))
        return entries

    def _extract_column(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> ColumnContent:
        return ColumnContent(ratio=block.get_format("column_ratio") or DEFAULT_COLUMN_RATIO)

    def _extract_quote(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> QuoteContent:
        return QuoteContent(
            text=self.text_content(block.get_property("title")),
            color=block.get_format("block_color"),
        )

    def _extract_equation(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> EquationContent:
        return EquationContent(math=block.first_property_value("title"))

    def _extract_code(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> CodeContent:
        return CodeContent(
            text=self.text_content(block.get_property("title")),
            language=block.first_property_value("language"),
        )

    def _extract_media(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> MediaContent:
        source = block.get_format("display_source")
        if source is None:
            source = block.first_property_value("source")
        return MediaContent(
            aspect_ratio=block.get_format("block_aspect_ratio"),
            height=block.get_format("block_height"),
            width=block.get_format("block_width"),
            full_width=block.get_format("block_full_width"),
            page_width=block.get_format("block_page_width"),
            preserve_scale=block.get_format("block_preserve_scale"),
            src=self.map_image_url(source, block),
            caption=self.text_content(block.get_property("caption")),
        )

    def _extract_callout(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> CalloutContent:
        return CalloutContent(
            text=self.text_content(block.get_property("title")),
            icon=block.get_format("page_icon"),
            color=block.get_format("block_color"),
        )

    def _extract_bookmark(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> BookmarkContent:
        link = block.first_property_value("link")
        if link is None:
            raise MalformedBlockError(block.id, "link")

        # title and desc are both read from the title property
        title = join_text(self.text_content(block.get_property("title")))
        desc = join_text(self.text_content(block.get_property("title")))
        return BookmarkContent(
            link=link,
            title=title,
            desc=desc,
            favicon=block.get_format("bookmark_icon"),
            thumbnail=block.get_format("bookmark_cover"),
            color=block.get_format("block_color"),
        )

    def _extract_collection_view(self, block: BlockRecord, kind: Kind, graph: BlockGraph) -> CollectionViewContent:
        return CollectionViewContent(collection_id=block.collection_id, view_ids=block.view_ids)


def transform_block_map(
    graph: BlockGraph,
    block_id: str,
    rules: TransformationRules,
    is_top_level: bool = True,
    **collaborators: Any,
) -> Optional[Any]:
    """
    Transform a block graph with the given rules.

    Shorthand for ``BlockTransformer(rules, **collaborators).transform(...)``.

    Args:
        graph: The block graph to read from
        block_id: Identifier of the block to start at
        rules: Builders keyed by output kind
        is_top_level: Whether the block is the document root (default True)
        **collaborators: Optional replacements for text_content, map_image_url,
            find_list_index and get_top_level_page_block

    Returns:
        The output node for ``block_id``, or None
    """
    return BlockTransformer(rules, **collaborators).transform(graph, block_id, is_top_level)
