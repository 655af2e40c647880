"""Rich-text flattening."""

from typing import Any, List, Optional

from ..models import TextSpan


def get_text_content(rich_text: Optional[List[Any]]) -> List[TextSpan]:
    """
    Flatten a rich-text property into a list of spans.

    Rich text is stored as ``[[text, decorations?], ...]``. Spans without
    decorations get an empty decoration list.

    Args:
        rich_text: The raw property value, or None

    Returns:
        One TextSpan per source span, in order
    """
    spans: List[TextSpan] = []
    for span in rich_text or []:
        if not span:
            continue
        decorations = span[1] if len(span) > 1 and span[1] else []
        spans.append(TextSpan(text=str(span[0]), decorations=list(decorations)))
    return spans


def join_text(spans: List[TextSpan]) -> str:
    """Concatenate the text of all spans."""
    return "".join(span.text for span in spans)
