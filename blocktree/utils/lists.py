"""List numbering."""

import logging

from ..models import BlockGraph


def find_list_index(block_id: str, graph: BlockGraph) -> int:
    """
    Compute the number of a list item within its run of same-type siblings.

    Walks the parent's ordered children up to ``block_id``; the count restarts
    whenever a sibling of a different type (or a missing sibling) interrupts
    the run.

    Args:
        block_id: Identifier of a bulleted_list or numbered_list block
        graph: The block graph containing it

    Returns:
        1-based index of the block within its run, 1 when it has no parent
    """
    block = graph.get(block_id)
    if block is None:
        return 1

    parent = graph.get(block.parent_id) if block.parent_id else None
    if parent is None or not parent.content:
        return 1

    index = 0
    for sibling_id in parent.content:
        sibling = graph.get(sibling_id)
        if sibling is not None and sibling.type == block.type:
            index += 1
        else:
            index = 0
        if sibling_id == block_id:
            return max(index, 1)

    logging.debug(f"Block {block_id} is not listed in the content of its parent {parent.id}")
    return 1
