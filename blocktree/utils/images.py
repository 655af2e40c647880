"""Image source URL mapping."""

from typing import Optional
from urllib.parse import quote, urlencode

from ..config import config
from ..models import BlockRecord


def map_image_url(url: Optional[str], block: BlockRecord) -> Optional[str]:
    """
    Resolve the URL an image or video block should be displayed from.

    Inline ``data:`` URLs and sources under one of the configured pass-through
    prefixes are returned unchanged. Every other source is routed through the
    configured image proxy, tagged with the owning table and block id.

    Args:
        url: The raw source (display_source or the first source property value)
        block: The block the source belongs to

    Returns:
        The resolved URL, or None when there is no source
    """
    if not url:
        return None

    if any(url.startswith(prefix) for prefix in config.image_passthrough_prefixes):
        return url

    table = block.parent_table if block.parent_table and block.parent_table != "space" else "block"
    query = urlencode({"table": table, "id": block.id})
    return f"{config.image_proxy_base}{quote(url, safe='')}?{query}"
