"""Helpers the transformer relies on for text, images, lists and page ancestry."""

from .text import get_text_content, join_text
from .images import map_image_url
from .lists import find_list_index
from .pages import get_top_level_page_block

__all__ = [
    "get_text_content",
    "join_text",
    "map_image_url",
    "find_list_index",
    "get_top_level_page_block",
]
