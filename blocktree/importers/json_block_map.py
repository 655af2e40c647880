"""
JSON block map importer for blocktree.

This module reads a block map exported as JSON (a Notion-style record map)
and converts every entry into a BlockRecord.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from ..exceptions import GraphLoadError
from ..models import BlockGraph, BlockRecord
from .base import BaseImporter


class JSONBlockMapImporter(BaseImporter):
    """
    Importer for JSON block map files.

    Accepts a full record map (``{"block": {...}}``), a bare block map of
    ``{id: {"role": ..., "value": {...}}}`` entries, or a map of plain
    ``{id: {...record...}}`` entries.
    """

    def __init__(self, block_map_path: str):
        """
        Initialize the JSON block map importer.

        Args:
            block_map_path: Path to the JSON file
        """
        self.block_map_path = Path(block_map_path)
        logging.info(f"Initialized JSON block map importer for: {self.block_map_path}")

    def get_block_graph(self) -> BlockGraph:
        """
        Load and validate the block map.

        Returns:
            The block graph, in file order

        Raises:
            GraphLoadError: If the file is missing, is not valid JSON, or holds
                an entry that is not a valid block
        """
        source = str(self.block_map_path)
        try:
            with open(self.block_map_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise GraphLoadError(source, f"cannot read file: {e}")
        except json.JSONDecodeError as e:
            raise GraphLoadError(source, f"invalid JSON: {e}")

        graph = parse_block_map(data, source)
        logging.info(f"Loaded {len(graph)} blocks from {source}")
        return graph


def parse_block_map(data: Any, source: str = "<memory>") -> BlockGraph:
    """
    Convert decoded JSON into a BlockGraph.

    Args:
        data: The decoded JSON document
        source: Name of the source, used in error messages

    Returns:
        The block graph

    Raises:
        GraphLoadError: If the document is not a block map
    """
    if not isinstance(data, Mapping):
        raise GraphLoadError(source, f"expected a JSON object, got {type(data).__name__}")

    # Full record maps keep blocks under a "block" table
    if isinstance(data.get("block"), Mapping):
        data = data["block"]

    graph: Dict[str, BlockRecord] = {}
    for block_id, entry in data.items():
        if not isinstance(entry, Mapping):
            raise GraphLoadError(source, f"entry '{block_id}' is not an object")

        record = entry.get("value", entry)
        if not isinstance(record, Mapping):
            raise GraphLoadError(source, f"entry '{block_id}' has no block value")

        try:
            graph[block_id] = BlockRecord.model_validate({"id": block_id, **record})
        except ValidationError as e:
            raise GraphLoadError(source, f"entry '{block_id}' is not a valid block: {e}")

    return graph
