# src/a11y_auditor/dom/core.py
import weakref
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from bs4 import BeautifulSoup, Tag

if TYPE_CHECKING:
    from .models import HTMLDocument
    from ..model import AccessibilityIssue

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


class ParseError(Exception):
    """Raised when a markup string cannot be turned into an HTMLDocument."""


class Element:
    """
    Read-only view on a single tag of a parsed HTMLDocument.

    The document owns the underlying BeautifulSoup tree; an Element only keeps
    a weak reference back to it, so it never extends the document's lifetime.
    """

    __slots__ = ("_tag", "_doc_ref")

    def __init__(self, tag: Tag, document: "HTMLDocument"):
        self._tag = tag
        self._doc_ref = weakref.ref(document)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Element) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return f"<Element {self.tag_name} {self.attrs!r}>"

    @property
    def document(self) -> Optional["HTMLDocument"]:
        return self._doc_ref()

    @property
    def tag_name(self) -> str:
        return self._tag.name.lower()

    @property
    def attrs(self) -> Dict[str, str]:
        """A copy of the attribute mapping; mutating it never touches the tree."""
        return dict(self._tag.attrs)

    @property
    def text(self) -> str:
        """Concatenated descendant text, trimmed."""
        return self._tag.get_text().strip()

    @property
    def outer_html(self) -> str:
        return str(self._tag)

    @property
    def role(self) -> Optional[str]:
        return self.get("role")

    def get(self, name: str) -> Optional[str]:
        """Returns the attribute value or None. Names are matched case-insensitively."""
        value = self._tag.attrs.get(name.lower())
        if value is None:
            return None
        # Attribute splitting is disabled in the builder, but guard anyway
        if isinstance(value, list):
            return " ".join(value)
        return value

    def has(self, name: str) -> bool:
        return name.lower() in self._tag.attrs

    def is_heading(self) -> bool:
        return self.tag_name in HEADING_TAGS

    def _live_document(self) -> "HTMLDocument":
        doc = self._doc_ref()
        if doc is None:
            raise ReferenceError(f"The document owning <{self.tag_name}> no longer exists")
        return doc

    def _wrap(self, tag: Optional[Tag]) -> Optional["Element"]:
        if tag is None:
            return None
        return Element(tag, self._live_document())

    @property
    def parent(self) -> Optional["Element"]:
        """The parent element, or None when this element sits at the document root."""
        parent = self._tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return self._wrap(parent)

    @property
    def previous_element_sibling(self) -> Optional["Element"]:
        return self._wrap(self._tag.find_previous_sibling(True))

    def siblings(self) -> List["Element"]:
        """All element siblings in document order, excluding this element."""
        container = self._tag.parent
        if container is None:
            return []
        doc = self._live_document()
        return [
            Element(child, doc)
            for child in container.children
            if isinstance(child, Tag) and child is not self._tag
        ]

    def find_all(self, *names: str) -> List["Element"]:
        """Descendant elements with one of the given tag names, in document order."""
        doc = self._live_document()
        return [Element(tag, doc) for tag in self._tag.find_all(list(names))]

    def find_all_matching(self, predicate: Callable[["Element"], bool]) -> List["Element"]:
        """Descendant elements for which the predicate holds, in document order."""
        doc = self._live_document()
        matches = []
        for tag in self._tag.find_all(True):
            element = Element(tag, doc)
            if predicate(element):
                matches.append(element)
        return matches


# Signature of a single audit predicate
RuleCheck = Callable[[Element], Optional["AccessibilityIssue"]]


class AuditRule(BaseModel):
    """
    Immutable description of one accessibility check.
    The predicate reads the element and its document and never mutates either.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str
    name: str
    description: str
    check: Callable[[Element], Any]

    def __call__(self, element: Element) -> Optional["AccessibilityIssue"]:
        return self.check(element)


def audit_rule(rule_id: str, name: str, description: str):
    """
    Decorator to declare the id, name and description of an audit predicate.
    Facilitates auto-discovery by the ElementDefinition.
    """
    def decorator(func):
        func.rule_spec = AuditRule(id=rule_id, name=name, description=description, check=func)
        return func
    return decorator


class ElementDefinition:
    """
    Configuration object binding an element category to its target selector and rules.
    """

    def __init__(
            self,
            category: str,
            title: str,
            short_name: str,
            noun: str,
            selector: Callable[["HTMLDocument"], List[Element]],
            audit_rules: Optional[List[RuleCheck]] = None
    ):
        self.category = category
        self.title = title
        self.short_name = short_name
        self.noun = noun
        self.selector = selector

        # --- Auto-Discovery of Rule Metadata ---
        rules: List[AuditRule] = []
        seen_ids = set()
        for func in audit_rules or []:
            rule = getattr(func, "rule_spec", None)
            if rule is None:
                raise ValueError(f"{getattr(func, '__name__', func)!r} is not decorated with @audit_rule")
            if rule.id in seen_ids:
                raise ValueError(f"Duplicate rule id '{rule.id}' in category '{category}'")
            seen_ids.add(rule.id)
            rules.append(rule)

        # Registration order is evaluation order
        self.rules = tuple(rules)

    @property
    def rule_ids(self) -> List[str]:
        return [rule.id for rule in self.rules]
