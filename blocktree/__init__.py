"""
blocktree: transform flat block graphs into typed output trees.

Walks a document stored as a mapping of block id to block record and builds an
output tree through caller-supplied rules, one builder per block kind.
"""

__version__ = "0.1.0"
__author__ = "blocktree Project"

# Import main components
from .exceptions import BlockTreeError, CyclicGraphError, GraphLoadError, MalformedBlockError
from .models import BlockGraph, BlockRecord, BlockType, Kind, TextSpan
from .transform import (
    BlockTransformer,
    RenderedNode,
    RuleSet,
    default_rules,
    group_blocks,
    group_children,
    group_sibling_ids,
    transform_block_map,
)
from .importers import BaseImporter, JSONBlockMapImporter, SampleImporter

__all__ = [
    "BlockTreeError",
    "CyclicGraphError",
    "GraphLoadError",
    "MalformedBlockError",
    "BlockGraph",
    "BlockRecord",
    "BlockType",
    "Kind",
    "TextSpan",
    "BlockTransformer",
    "RenderedNode",
    "RuleSet",
    "default_rules",
    "group_blocks",
    "group_children",
    "group_sibling_ids",
    "transform_block_map",
    "BaseImporter",
    "JSONBlockMapImporter",
    "SampleImporter",
]
