# src/a11y_auditor/dom/models.py
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from .core import Element

# Attributes that turn an element into a dropdown trigger
DROPDOWN_TRIGGER_ATTRS = ("aria-expanded", "aria-haspopup")


class HTMLDocument:
    """
    Represents a parsed markup fragment.

    The document exclusively owns the BeautifulSoup tree and the original source
    string. It is built fresh for every check and carries no cross-call state.
    """

    def __init__(self, soup: BeautifulSoup, source: str):
        self.soup = soup
        self.source = source
        self._id_index: Dict[str, Tag] = self._build_id_index(soup)

    @staticmethod
    def _build_id_index(soup: BeautifulSoup) -> Dict[str, Tag]:
        """Maps every non-empty id to its tag. A later duplicate replaces an earlier one."""
        index: Dict[str, Tag] = {}
        for tag in soup.find_all(True):
            element_id = tag.attrs.get("id")
            if element_id:
                index[element_id] = tag
        return index

    def get_element_by_id(self, element_id: Optional[str]) -> Optional[Element]:
        if not element_id:
            return None
        tag = self._id_index.get(element_id)
        return Element(tag, self) if tag is not None else None

    def has_id(self, element_id: Optional[str]) -> bool:
        return bool(element_id) and element_id in self._id_index

    @property
    def ids(self) -> List[str]:
        return list(self._id_index)

    def find_all(self, *names: str) -> List[Element]:
        """All elements with one of the given tag names, in document order."""
        return [Element(tag, self) for tag in self.soup.find_all(list(names))]

    # --- Category Queries ---

    def nav_elements(self) -> List[Element]:
        """Every <nav> landmark in document order."""
        return self.find_all("nav")

    def dropdown_triggers(self) -> List[Element]:
        """
        Every element acting as a dropdown trigger, in document order.

        An element qualifies when it carries aria-expanded or aria-haspopup.
        Elements with role="button" are covered by the same condition.
        """
        return [
            Element(tag, self)
            for tag in self.soup.find_all(True)
            if any(attr in tag.attrs for attr in DROPDOWN_TRIGGER_ATTRS)
        ]
