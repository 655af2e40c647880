"""
Sample importer for blocktree.

This module provides a hardcoded document covering the supported block types,
for trying out rule sets and the command line tool without an exported block map.
"""

from typing import Any, Dict, List, Optional

from ..models import BlockGraph, BlockRecord
from .base import BaseImporter

SAMPLE_ROOT_ID = "page-root"


class SampleImporter(BaseImporter):
    """
    Importer that returns a hardcoded sample document.
    """

    def __init__(self):
        """Initialize the sample importer with its document."""
        self._graph = self._create_sample_graph()

    def get_block_graph(self) -> BlockGraph:
        """
        Return the sample block graph.

        Returns:
            The sample graph, rooted at SAMPLE_ROOT_ID
        """
        return dict(self._graph)

    def _create_sample_graph(self) -> BlockGraph:
        """
        Create the sample document.

        Returns:
            Block graph whose root page contains one block of most types
        """
        blocks: List[BlockRecord] = []

        def add(block_id: str, block_type: str, parent_id: Optional[str] = SAMPLE_ROOT_ID,
                properties: Optional[Dict[str, Any]] = None, format: Optional[Dict[str, Any]] = None,
                content: Optional[List[str]] = None, **extra: Any) -> None:
            blocks.append(BlockRecord(
                id=block_id,
                type=block_type,
                properties=properties,
                format=format,
                content=content,
                parent_id=parent_id,
                parent_table="block" if parent_id else "space",
                **extra,
            ))

        add(SAMPLE_ROOT_ID, "page", parent_id=None,
            properties={"title": [["Getting Started"]]},
            format={"page_icon": "📘"},
            content=[
                "header-intro", "toc", "text-welcome", "bullet-1", "bullet-2",
                "subheader-tasks", "todo-1", "todo-2", "divider-1", "columns",
                "subsubheader-ref", "quote-1", "code-1", "equation-1", "image-1",
                "bookmark-1", "callout-1", "toggle-1", "page-child", "table-1",
            ])

        # Section: introduction
        add("header-intro", "header", properties={"title": [["Introduction"]]})
        add("toc", "table_of_contents")
        add("text-welcome", "text", properties={"title": [["Welcome to "], ["blocktree", [["b"]]], ["."]]})
        add("bullet-1", "bulleted_list", properties={"title": [["Blocks are stored flat"]]})
        add("bullet-2", "bulleted_list", properties={"title": [["Children are referenced by id"]]})

        # Section: tasks
        add("subheader-tasks", "sub_header", properties={"title": [["Tasks"]]})
        add("todo-1", "to_do", properties={"title": [["Write rules"]], "checked": [["Yes"]]})
        add("todo-2", "to_do", properties={"title": [["Render output"]]})
        add("divider-1", "divider")

        # Two columns, the first one wider
        add("columns", "column_list", content=["column-left", "column-right"])
        add("column-left", "column", parent_id="columns", format={"column_ratio": 0.625},
            content=["number-1", "number-2"])
        add("number-1", "numbered_list", parent_id="column-left", properties={"title": [["First"]]})
        add("number-2", "numbered_list", parent_id="column-left", properties={"title": [["Second"]]})
        add("column-right", "column", parent_id="columns", content=["text-side"])
        add("text-side", "text", parent_id="column-right", properties={"title": [["Side note"]]})

        # Section: reference material
        add("subsubheader-ref", "sub_sub_header", properties={"title": [["Reference"]]})
        add("quote-1", "quote", properties={"title": [["Simple things should be simple."]]},
            format={"block_color": "gray"})
        add("code-1", "code", properties={"title": [["print('hello')"]], "language": [["Python"]]})
        add("equation-1", "equation", properties={"title": [["E = mc^2"]]})
        add("image-1", "image",
            properties={"source": [["https://example.com/diagram.png"]], "caption": [["Architecture"]]},
            format={"block_width": 640, "block_height": 480, "block_full_width": False,
                    "block_page_width": True, "block_preserve_scale": True, "block_aspect_ratio": 0.75})
        add("bookmark-1", "bookmark",
            properties={"link": [["https://www.python.org"]], "title": [["Welcome to "], ["Python.org"]]},
            format={"bookmark_icon": "https://www.python.org/favicon.ico"})
        add("callout-1", "callout", properties={"title": [["Pages below the root become links."]]},
            format={"page_icon": "💡", "block_color": "yellow_background"})
        add("toggle-1", "toggle", properties={"title": [["Details"]]}, content=["text-hidden", "missing-block"])
        add("text-hidden", "text", parent_id="toggle-1", properties={"title": [["Hidden until expanded"]]})
        add("page-child", "page", properties={"title": [["Appendix"]]}, format={"page_icon": "📎"},
            content=["text-appendix"])
        add("text-appendix", "text", parent_id="page-child", properties={"title": [["Not expanded"]]})
        add("table-1", "collection_view", collection_id="collection-1", view_ids=["view-1", "view-2"])

        return {block.id: block for block in blocks}
