# src/a11y_auditor/dom/position.py
import logging
from typing import List, NamedTuple, Optional

from .core import Element

logger = logging.getLogger(__name__)


class SourcePosition(NamedTuple):
    """1-based location of an element's opening tag in the submitted markup."""
    line: int
    column: int


def _attribute_markers(name: str, value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [f'{name}="{value}"', f"{name}='{value}'"]


def get_element_position(element: Element, source: str) -> Optional[SourcePosition]:
    """
    Best-effort mapping of an element back to its place in the source text.

    First looks for the element's serialized markup verbatim on a single line.
    When the serializer reformatted the element, falls back to the first line
    containing '<tagname' plus the element's id=".." or class=".." attribute
    (either quote style). An element with neither id nor class matches on the
    tag fragment alone.

    Returns None when nothing matches; callers treat that as a normal outcome.
    """
    lines = source.split("\n")

    # --- 1. Exact serialized match ---
    outer_html = element.outer_html
    for index, line in enumerate(lines):
        column = line.find(outer_html)
        if column != -1:
            return SourcePosition(index + 1, column + 1)

    # --- 2. Heuristic: opening tag + identifying attribute ---
    fragment = f"<{element.tag_name}"
    markers = _attribute_markers("id", element.get("id")) + _attribute_markers("class", element.get("class"))

    for index, line in enumerate(lines):
        column = line.find(fragment)
        if column == -1:
            continue
        if not markers or any(marker in line for marker in markers):
            return SourcePosition(index + 1, column + 1)

    logger.debug("No source position found for <%s>", element.tag_name)
    return None
