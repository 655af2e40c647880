"""
Sibling grouping for blocktree.

Partitions the children of a block into maximal runs of contiguous same-type
siblings, so that renderers can wrap e.g. consecutive list items in a single
list container.
"""

from typing import Iterable, List, Optional

from ..models import BlockGraph


def group_sibling_ids(graph: BlockGraph, sibling_ids: Iterable[str]) -> List[List[str]]:
    """
    Split an ordered list of sibling identifiers into same-type runs.

    A new group starts exactly where a child's type differs from the type of
    the previous child found in the graph. Identifiers missing from the graph
    join the current run without breaking it; missing identifiers that come
    before any resolved sibling form a group of their own.

    Args:
        graph: The block graph the siblings live in
        sibling_ids: The siblings, in document order

    Returns:
        The runs, in order
    """
    groups: List[List[str]] = []
    current_type: Optional[str] = None

    for block_id in sibling_ids:
        block = graph.get(block_id)
        if block is None:
            if not groups:
                groups.append([])
            groups[-1].append(block_id)
            continue
        if block.type != current_type:
            current_type = block.type
            groups.append([])
        groups[-1].append(block_id)

    return groups


def group_children(graph: BlockGraph, parent_id: str) -> List[List[str]]:
    """
    Group the direct children of one block.

    Returns:
        The runs of the parent's children, or an empty list when the parent is
        missing or has no children
    """
    parent = graph.get(parent_id)
    if parent is None or not parent.content:
        return []
    return group_sibling_ids(graph, parent.content)


def group_blocks(graph: BlockGraph) -> List[List[str]]:
    """
    Group the children of every block in the graph.

    Parents are visited in the graph's iteration order and each parent's
    children in their own order. The runs of all parents are concatenated into
    one flat list; use group_children to keep them apart.
    """
    groups: List[List[str]] = []
    for block_id in graph:
        groups.extend(group_children(graph, block_id))
    return groups
