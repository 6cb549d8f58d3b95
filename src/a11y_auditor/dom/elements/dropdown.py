import re
from typing import Optional

from ..core import Element, ElementDefinition, audit_rule
from ..models import HTMLDocument
from ...model import AccessibilityIssue

VALID_EXPANDED_VALUES = ("true", "false")
VALID_HASPOPUP_VALUES = ("true", "false", "menu", "listbox", "tree", "grid", "dialog")

# Text made up only of symbols such as '☰' or '▼'. Word characters are ASCII only,
# so a non-Latin label also counts as symbols and gets the aria-label hint
SYMBOLS_ONLY_PATTERN = re.compile(r"^[^\w\s]*$", re.ASCII)

# Menus with more interactive items than this should explain their keyboard model
MENU_ITEM_HINT_THRESHOLD = 5


def _is_menu_item(element: Element) -> bool:
    return element.tag_name in ("a", "button") or element.role == "menuitem"


def _has_keyboard_instructions(element: Element) -> bool:
    return element.has("aria-describedby") or bool(element.get("title"))


# --- AUDIT RULES ---


@audit_rule(
    "dropdown-requires-aria-expanded",
    "Dropdown button requires aria-expanded",
    "Dropdown buttons must have aria-expanded attribute to indicate state",
)
def check_requires_aria_expanded(node: Element) -> Optional[AccessibilityIssue]:
    if node.has("aria-expanded"):
        return None

    return AccessibilityIssue(
        severity="error",
        message="Dropdown button is missing aria-expanded attribute",
        element=node.tag_name,
        suggestion='Add aria-expanded="false" (or "true" if expanded) to indicate dropdown state',
        example_code='<button aria-expanded="false" aria-haspopup="true">Menu</button>',
    )


@audit_rule(
    "dropdown-aria-expanded-value",
    "aria-expanded must have valid boolean value",
    'aria-expanded should be "true" or "false", not other values',
)
def check_aria_expanded_value(node: Element) -> Optional[AccessibilityIssue]:
    expanded = node.get("aria-expanded")
    if expanded is None or expanded in VALID_EXPANDED_VALUES:
        return None

    return AccessibilityIssue(
        severity="error",
        message=f'aria-expanded has invalid value "{expanded}". Must be "true" or "false"',
        element=node.tag_name,
        suggestion='Use aria-expanded="false" for collapsed state or aria-expanded="true" for expanded state',
        example_code='<button aria-expanded="false" aria-haspopup="true">Menu</button>',
    )


@audit_rule(
    "dropdown-requires-aria-haspopup",
    "Dropdown button should have aria-haspopup",
    "Dropdown buttons should indicate they trigger a popup with aria-haspopup",
)
def check_requires_aria_haspopup(node: Element) -> Optional[AccessibilityIssue]:
    if not node.has("aria-expanded") or node.has("aria-haspopup"):
        return None

    return AccessibilityIssue(
        severity="warning",
        message="Dropdown button should have aria-haspopup attribute",
        element=node.tag_name,
        suggestion='Add aria-haspopup="true" for generic popup, "menu" for menu, or "listbox" for listbox',
        example_code='<button aria-expanded="false" aria-haspopup="menu">Options</button>',
    )


@audit_rule(
    "dropdown-aria-haspopup-value",
    "aria-haspopup should have appropriate value",
    'aria-haspopup should use specific values like "menu", "listbox", "tree", "grid", or "dialog"',
)
def check_aria_haspopup_value(node: Element) -> Optional[AccessibilityIssue]:
    haspopup = node.get("aria-haspopup")
    if haspopup is None:
        return None

    if haspopup not in VALID_HASPOPUP_VALUES:
        return AccessibilityIssue(
            severity="warning",
            message=f'aria-haspopup value "{haspopup}" is not standard. Consider using specific popup type',
            element=node.tag_name,
            suggestion='Use "menu" for navigation menus, "listbox" for option lists, or "dialog" for modal content',
            example_code='<button aria-expanded="false" aria-haspopup="menu">Navigation Menu</button>',
        )

    # Generic "true" is valid but less informative than a concrete popup type
    if haspopup == "true":
        return AccessibilityIssue(
            severity="warning",
            message='Consider using specific aria-haspopup value instead of generic "true"',
            element=node.tag_name,
            suggestion='Use "menu" for navigation menus, "listbox" for option lists, or "dialog" for modal content',
            example_code='<button aria-expanded="false" aria-haspopup="menu">Menu</button>',
        )

    return None


@audit_rule(
    "dropdown-requires-aria-controls",
    "Dropdown button should have aria-controls",
    "Dropdown buttons should reference the controlled element with aria-controls",
)
def check_requires_aria_controls(node: Element) -> Optional[AccessibilityIssue]:
    if not node.has("aria-expanded") or node.has("aria-controls"):
        return None

    return AccessibilityIssue(
        severity="warning",
        message="Dropdown button should have aria-controls attribute to reference the controlled content",
        element=node.tag_name,
        suggestion="Add aria-controls with the ID of the dropdown content element",
        example_code='<button aria-expanded="false" aria-controls="dropdown-menu">Menu</button>\n<ul id="dropdown-menu">...</ul>',
    )


@audit_rule(
    "dropdown-aria-controls-target-exists",
    "aria-controls must reference existing element",
    "aria-controls must point to an element with a matching ID",
)
def check_aria_controls_target_exists(node: Element) -> Optional[AccessibilityIssue]:
    controls = node.get("aria-controls")
    if not controls or node.document.has_id(controls):
        return None

    return AccessibilityIssue(
        severity="error",
        message=f'Dropdown button references non-existent ID "{controls}" in aria-controls',
        element=node.tag_name,
        suggestion=f'Create an element with id="{controls}" or update the aria-controls value',
        example_code=f'<button aria-controls="{controls}" aria-expanded="false">Menu</button>\n<ul id="{controls}">...</ul>',
    )


@audit_rule(
    "dropdown-accessible-name",
    "Dropdown button must have accessible name",
    "Dropdown buttons must have clear text content or aria-label",
)
def check_accessible_name(node: Element) -> Optional[AccessibilityIssue]:
    text = node.text
    aria_label = (node.get("aria-label") or "").strip()

    has_name = bool(text) or bool(aria_label)
    if not has_name:
        label_target = node.document.get_element_by_id(node.get("aria-labelledby"))
        has_name = label_target is not None and bool(label_target.text)

    if not has_name:
        return AccessibilityIssue(
            severity="error",
            message="Dropdown button must have accessible name (text content, aria-label, or aria-labelledby)",
            element=node.tag_name,
            suggestion="Add meaningful text content or aria-label to describe the button's purpose",
            example_code='<button aria-expanded="false" aria-label="Open main menu">☰</button>',
        )

    if text and not aria_label and SYMBOLS_ONLY_PATTERN.match(text):
        return AccessibilityIssue(
            severity="warning",
            message="Dropdown button uses only symbols - consider adding aria-label for clarity",
            element=node.tag_name,
            suggestion="Add aria-label to provide clear description of the button's function",
            example_code=f'<button aria-expanded="false" aria-label="Toggle menu">{text}</button>',
        )

    return None


@audit_rule(
    "dropdown-keyboard-hint",
    "Consider keyboard navigation hints",
    "Complex dropdowns should provide keyboard navigation guidance",
)
def check_keyboard_hint(node: Element) -> Optional[AccessibilityIssue]:
    if node.get("aria-haspopup") != "menu":
        return None

    menu = node.document.get_element_by_id(node.get("aria-controls"))
    if menu is None:
        return None

    if len(menu.find_all_matching(_is_menu_item)) <= MENU_ITEM_HINT_THRESHOLD:
        return None

    if _has_keyboard_instructions(node) or _has_keyboard_instructions(menu):
        return None

    return AccessibilityIssue(
        severity="warning",
        message="Complex dropdown menu should provide keyboard navigation hints",
        element=node.tag_name,
        suggestion="Consider adding aria-describedby to reference keyboard instructions",
        example_code=(
            '<button aria-expanded="false" aria-controls="menu" aria-describedby="menu-help">Menu</button>\n'
            '<div id="menu-help" class="sr-only">Use arrow keys to navigate, Enter to select</div>'
        ),
    )


# --- ELEMENT DEFINITION ---

DEFINITION = ElementDefinition(
    category="dropdown",
    title="Dropdown Accessibility Report",
    short_name="Dropdown",
    noun="dropdown button(s)",
    selector=HTMLDocument.dropdown_triggers,
    audit_rules=[
        check_requires_aria_expanded,
        check_aria_expanded_value,
        check_requires_aria_haspopup,
        check_aria_haspopup_value,
        check_requires_aria_controls,
        check_aria_controls_target_exists,
        check_accessible_name,
        check_keyboard_hint,
    ]
)
