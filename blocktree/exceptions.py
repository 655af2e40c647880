"""
Exception types for blocktree.

Missing child blocks, unregistered kinds and unknown block types are not
errors; these exceptions cover the cases the transformer cannot recover from.
"""

from typing import Sequence


class BlockTreeError(Exception):
    """Base class for all blocktree errors."""


class MalformedBlockError(BlockTreeError):
    """A block lacks a field its type requires."""

    def __init__(self, block_id: str, field: str):
        self.block_id = block_id
        self.field = field
        super().__init__(f"Block '{block_id}' is missing required field '{field}'")


class CyclicGraphError(BlockTreeError):
    """A block was reached again while still being transformed."""

    def __init__(self, block_id: str, path: Sequence[str] = ()):
        self.block_id = block_id
        self.path = list(path)
        chain = " -> ".join(self.path + [block_id])
        super().__init__(f"Cycle detected at block '{block_id}': {chain}")


class GraphLoadError(BlockTreeError):
    """A block graph could not be read from its source."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load block graph from {source}: {reason}")
