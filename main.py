#!/usr/bin/env python3
"""
blocktree - Block Graph Transformer

Main entry point for blocktree. Loads a block graph, transforms it from a
root block with the builtin rules and writes the resulting tree (or the
sibling groups) as JSON.
"""

import json
import logging
import sys
import argparse
from typing import List, Optional

from blocktree.config import config
from blocktree.exceptions import BlockTreeError
from blocktree.importers import BaseImporter, JSONBlockMapImporter, SampleImporter, SAMPLE_ROOT_ID
from blocktree.models import BlockGraph
from blocktree.transform import BlockTransformer, default_rules, group_blocks


def setup_logging(level_name: Optional[str] = None):
    """Configure logging for the application."""
    level = getattr(logging, (level_name or config.get("logging.level", "INFO")).upper())
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    log_file = config.log_filename

    # stdout carries the JSON output
    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file)
        ]
    )


def get_importer(args: argparse.Namespace) -> BaseImporter:
    """
    Pick the importer for the given arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        The importer to load the graph with
    """
    if args.sample:
        return SampleImporter()
    if not args.input:
        raise SystemExit("error: an INPUT file is required unless --sample is given")
    return JSONBlockMapImporter(args.input)


def resolve_root(graph: BlockGraph, args: argparse.Namespace) -> Optional[str]:
    """Return the root block id: --root, the sample root, or the first block in the map."""
    if args.root:
        return args.root
    if args.sample:
        return SAMPLE_ROOT_ID
    return next(iter(graph), None)


def run(args: argparse.Namespace) -> str:
    """
    Load, transform and serialise according to ``args``.

    Returns:
        The JSON document to write
    """
    graph = get_importer(args).get_block_graph()
    indent = config.output_indent

    if args.groups:
        groups = group_blocks(graph)
        logging.info(f"Grouped children into {len(groups)} runs")
        return json.dumps(groups, indent=indent, ensure_ascii=False)

    root_id = resolve_root(graph, args)
    logging.info(f"Transforming block graph of {len(graph)} blocks from root {root_id}")
    tree = BlockTransformer(default_rules()).transform(graph, root_id) if root_id else None
    if tree is None:
        logging.warning(f"Root block {root_id} produced no output")
        return json.dumps(None)
    return json.dumps(tree.model_dump(mode="json"), indent=indent, ensure_ascii=False)


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="blocktree - transform a flat block graph into a nested tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --sample                         # Transform the builtin sample document
  python main.py blocks.json                      # Transform from the first block in the map
  python main.py blocks.json --root <block-id>    # Transform from a given block
  python main.py blocks.json --groups             # Print same-type sibling runs instead
        """
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Path to a JSON block map (record map export)"
    )

    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use the builtin sample document instead of an input file"
    )

    parser.add_argument(
        "--root",
        type=str,
        help="Identifier of the root block (default: first block in the map)"
    )

    parser.add_argument(
        "--groups",
        action="store_true",
        help="Output runs of same-type siblings instead of the transformed tree"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        help="Write JSON to this file instead of stdout"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="blocktree 0.1.0"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    try:
        output = run(args)
    except BlockTreeError as e:
        logging.error(f"Transformation failed: {e}")
        print(f"\nTransformation failed: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output + "\n")
        logging.info(f"Wrote output to {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
