"""
Base importer interface for blocktree.

This module defines the abstract interface that all block graph importers must implement.
"""

from abc import ABC, abstractmethod

from ..models import BlockGraph


class BaseImporter(ABC):
    """
    Abstract base class for all block graph importers.

    Each importer reads a document from a specific source (an exported record
    map, hardcoded sample data, ...) into a BlockGraph.
    """

    @abstractmethod
    def get_block_graph(self) -> BlockGraph:
        """
        Retrieve the full block graph from the data source.

        Returns:
            Mapping from block identifier to BlockRecord
        """
        pass
