"""Block graph transformation and sibling grouping."""

from .rules import Builder, RenderedNode, RuleSet, TransformationRules, default_rules
from .transformer import BlockTransformer, transform_block_map
from .grouping import group_blocks, group_children, group_sibling_ids

__all__ = [
    "Builder",
    "RenderedNode",
    "RuleSet",
    "TransformationRules",
    "default_rules",
    "BlockTransformer",
    "transform_block_map",
    "group_blocks",
    "group_children",
    "group_sibling_ids",
]
