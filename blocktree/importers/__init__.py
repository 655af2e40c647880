"""Block graph importers for various sources."""

from .base import BaseImporter
from .json_block_map import JSONBlockMapImporter, parse_block_map
from .sample import SampleImporter, SAMPLE_ROOT_ID

__all__ = ["BaseImporter", "JSONBlockMapImporter", "parse_block_map", "SampleImporter", "SAMPLE_ROOT_ID"]
