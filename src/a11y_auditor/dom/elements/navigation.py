from typing import Optional

from ..core import Element, ElementDefinition, audit_rule
from ..models import HTMLDocument
from ...model import AccessibilityIssue


def _effective_label(nav: Element) -> str:
    """
    Resolves the accessible name of a landmark: a non-empty aria-label wins,
    otherwise the trimmed text of the aria-labelledby target, otherwise ''.
    """
    aria_label = nav.get("aria-label")
    if aria_label:
        return aria_label

    labelledby = nav.get("aria-labelledby")
    if labelledby and nav.document is not None:
        target = nav.document.get_element_by_id(labelledby)
        if target is not None:
            return target.text
    return ""


def _labelling_heading(nav: Element) -> Optional[Element]:
    """A heading with an id right before the nav, or the first heading among its siblings."""
    previous = nav.previous_element_sibling
    if previous is not None and previous.is_heading() and previous.get("id"):
        return previous

    for sibling in nav.siblings():
        if sibling.is_heading():
            return sibling if sibling.get("id") else None
    return None


# --- AUDIT RULES ---


@audit_rule(
    "nav-requires-label",
    "Navigation requires accessible label",
    "Nav elements must have either aria-label or aria-labelledby attributes",
)
def check_requires_label(node: Element) -> Optional[AccessibilityIssue]:
    if node.has("aria-label") or node.has("aria-labelledby"):
        return None

    return AccessibilityIssue(
        severity="error",
        message="Navigation element is missing aria-label or aria-labelledby attribute",
        element=node.tag_name,
        suggestion='Add aria-label="Main navigation" or aria-labelledby="nav-heading-id" to provide an accessible name',
        example_code='<nav aria-label="Main navigation">\n  <ul>\n    <li><a href="/">Home</a></li>\n  </ul>\n</nav>',
    )


@audit_rule(
    "nav-empty-label",
    "Navigation label must not be empty",
    "aria-label attributes must have meaningful content",
)
def check_empty_label(node: Element) -> Optional[AccessibilityIssue]:
    aria_label = node.get("aria-label")
    if aria_label is None or aria_label.strip():
        return None

    return AccessibilityIssue(
        severity="error",
        message="Navigation element has empty aria-label attribute",
        element=node.tag_name,
        suggestion='Provide a meaningful label like "Main navigation" or "Secondary navigation"',
        example_code='<nav aria-label="Main navigation">...</nav>',
    )


@audit_rule(
    "nav-labelledby-target-exists",
    "aria-labelledby must reference existing element",
    "aria-labelledby must point to an element with a matching ID",
)
def check_labelledby_target_exists(node: Element) -> Optional[AccessibilityIssue]:
    labelledby = node.get("aria-labelledby")
    if not labelledby or node.document.has_id(labelledby):
        return None

    return AccessibilityIssue(
        severity="error",
        message=f'Navigation element references non-existent ID "{labelledby}" in aria-labelledby',
        element=node.tag_name,
        suggestion=f'Create an element with id="{labelledby}" or update the aria-labelledby value',
        example_code=f'<h2 id="{labelledby}">Navigation</h2>\n<nav aria-labelledby="{labelledby}">...</nav>',
    )


@audit_rule(
    "nav-prefers-labelledby",
    "Prefer aria-labelledby over aria-label when visible label exists",
    "Use aria-labelledby when there is visible heading text that labels the navigation",
)
def check_prefers_labelledby(node: Element) -> Optional[AccessibilityIssue]:
    if not node.has("aria-label") or node.has("aria-labelledby"):
        return None

    heading = _labelling_heading(node)
    if heading is None:
        return None

    heading_id = heading.get("id")
    return AccessibilityIssue(
        severity="warning",
        message="Consider using aria-labelledby instead of aria-label when visible heading is available",
        element=node.tag_name,
        suggestion=f'Use aria-labelledby="{heading_id}" to reference the visible heading',
        example_code=f'<h2 id="{heading_id}">{heading.text}</h2>\n<nav aria-labelledby="{heading_id}">...</nav>',
    )


@audit_rule(
    "nav-semantic-structure",
    "Navigation should use semantic list structure",
    "Nav elements should contain ul/ol lists for better screen reader support",
)
def check_semantic_structure(node: Element) -> Optional[AccessibilityIssue]:
    if node.find_all("ul", "ol") or not node.find_all("a"):
        return None

    return AccessibilityIssue(
        severity="warning",
        message="Navigation should use semantic list structure (ul/li) for better accessibility",
        element=node.tag_name,
        suggestion="Wrap navigation links in an unordered list",
        example_code=(
            '<nav aria-label="Main navigation">\n'
            '  <ul>\n'
            '    <li><a href="/">Home</a></li>\n'
            '    <li><a href="/about">About</a></li>\n'
            '    <li><a href="/contact">Contact</a></li>\n'
            '  </ul>\n'
            '</nav>'
        ),
    )


@audit_rule(
    "nav-unique-labels",
    "Multiple navigation elements must have unique labels",
    "When multiple nav elements exist, each must have a unique accessible name",
)
def check_unique_labels(node: Element) -> Optional[AccessibilityIssue]:
    all_navs = node.document.nav_elements()
    if len(all_navs) <= 1:
        return None

    current_label = _effective_label(node)
    if not current_label:
        return AccessibilityIssue(
            severity="error",
            message="Multiple navigation elements detected - each must have a unique label",
            element=node.tag_name,
            suggestion='Add unique aria-label like "Main navigation", "Secondary navigation", or "Footer navigation"',
            example_code='<nav aria-label="Main navigation">...</nav>\n<nav aria-label="Footer navigation">...</nav>',
        )

    # Exact, case-sensitive comparison
    duplicate_found = any(
        nav != node and _effective_label(nav) == current_label
        for nav in all_navs
    )
    if not duplicate_found:
        return None

    return AccessibilityIssue(
        severity="error",
        message=f'Multiple navigation elements have the same label: "{current_label}"',
        element=node.tag_name,
        suggestion="Ensure each navigation has a unique label to help users distinguish between them",
        example_code='<nav aria-label="Main navigation">...</nav>\n<nav aria-label="Breadcrumb navigation">...</nav>',
    )


# --- ELEMENT DEFINITION ---

DEFINITION = ElementDefinition(
    category="nav",
    title="Navigation Accessibility Report",
    short_name="Nav",
    noun="navigation element(s)",
    selector=HTMLDocument.nav_elements,
    audit_rules=[
        check_requires_label,
        check_empty_label,
        check_labelledby_target_exists,
        check_prefers_labelledby,
        check_semantic_structure,
        check_unique_labels,
    ]
)
