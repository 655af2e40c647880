"""
Transformation rules for blocktree.

A rule set maps each output kind to a builder ``(block_id, content, children)``
that constructs one output node. Rules are the transformer's only extension
point; a kind without a builder is skipped.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, Field

from ..models import BlockType, Kind

T = TypeVar("T")

Builder = Callable[[str, Any, Optional[List[T]]], T]

# What callers may pass as rules: a RuleSet, or a plain mapping keyed by Kind
# or BlockType members, or their string values (e.g. "pageLink", "sub_header")
TransformationRules = Union["RuleSet[T]", Mapping[Union[Kind, BlockType, str], Builder]]


class RuleSet(Generic[T]):
    """
    Registry of builders keyed by output kind.
    """

    def __init__(self, rules: Optional[Mapping[Union[Kind, str], Builder]] = None):
        """
        Initialize the rule set.

        Args:
            rules: Optional initial builders keyed by Kind or kind name
        """
        self._rules: Dict[Kind, Builder] = {}
        for kind, builder in (rules or {}).items():
            self.register(kind, builder)

    @classmethod
    def coerce(cls, rules: "TransformationRules") -> "RuleSet":
        """Return ``rules`` as a RuleSet, wrapping plain mappings."""
        if isinstance(rules, RuleSet):
            return rules
        return cls(rules)

    def register(self, kind: Union[Kind, BlockType, str], builder: Builder) -> None:
        """
        Register the builder for a kind, replacing any previous one.

        Block type names are accepted as keys too. sub_header and
        sub_sub_header blocks are built by the header rule, so builders
        registered under those names are never called and are dropped.

        Args:
            kind: The output kind, as a Kind, a BlockType or either's string value
            builder: Callable receiving (block_id, content, children)

        Raises:
            ValueError: If ``kind`` names neither an output kind nor a block type
        """
        try:
            key = Kind(kind)
        except ValueError:
            try:
                block_type = BlockType(kind)
            except ValueError:
                raise ValueError(f"Unknown output kind '{kind}'")
            logging.debug(f"Ignoring rule for '{block_type.value}', those blocks are built by the '{Kind.HEADER.value}' rule")
            return
        self._rules[key] = builder

    def get(self, kind: Kind) -> Optional[Builder]:
        """
        Get the builder for a kind.

        Returns:
            The builder, or None if the kind is not registered
        """
        return self._rules.get(kind)

    def kinds(self) -> List[Kind]:
        """List the registered kinds."""
        return list(self._rules.keys())

    def __contains__(self, kind: object) -> bool:
        try:
            return Kind(kind) in self._rules
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._rules)


class RenderedNode(BaseModel):
    """
    Generic output node produced by the builtin rule set.
    """

    id: str = Field(
        ...,
        description="Identifier of the source block"
    )

    kind: Kind = Field(
        ...,
        description="The resolved output kind"
    )

    content: Any = Field(
        default=None,
        description="Extracted content for the kind, if any"
    )

    children: Optional[List['RenderedNode']] = Field(
        default=None,
        description="Transformed children, for kinds that recurse"
    )


RenderedNode.model_rebuild()


def _render_builder(kind: Kind) -> Builder:
    def build(block_id: str, content: Any, children: Optional[List[RenderedNode]]) -> RenderedNode:
        return RenderedNode(id=block_id, kind=kind, content=content, children=children)
    return build


def default_rules() -> RuleSet[RenderedNode]:
    """
    Build a rule set that renders every kind, unknown included, as a RenderedNode.
    """
    rules: RuleSet[RenderedNode] = RuleSet()
    for kind in Kind:
        rules.register(kind, _render_builder(kind))
    return rules
