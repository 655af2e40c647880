"""Page ancestry lookup."""

from typing import Optional, Set

from ..models import BlockGraph, BlockRecord, BlockType


def get_top_level_page_block(block: BlockRecord, graph: BlockGraph) -> Optional[BlockRecord]:
    """
    Find the top-level page that contains a block.

    Follows ``parent_id`` upward and returns the outermost page reached before
    the chain leaves the graph. A page with no page above it is its own
    top-level page.

    Args:
        block: The block to start from
        graph: The block graph containing it

    Returns:
        The top-level page record, or None when no page encloses the block
    """
    top_page = block if block.type == BlockType.PAGE.value else None
    seen: Set[str] = {block.id}
    current = block

    while current.parent_id and current.parent_id not in seen:
        parent = graph.get(current.parent_id)
        if parent is None:
            break
        if parent.type == BlockType.PAGE.value:
            top_page = parent
        seen.add(parent.id)
        current = parent

    return top_page
