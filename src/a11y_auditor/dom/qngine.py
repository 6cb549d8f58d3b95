# src/a11y_auditor/dom/qngine.py
import logging
from typing import Dict, List, Optional, Tuple

from .core import Element
from .models import HTMLDocument
from .position import SourcePosition, get_element_position
from .registry import DOMRegistry
from ..model import AccessibilityIssue

logger = logging.getLogger(__name__)


class QNGINE:
    """
    Quality Engine (QNGINE) for auditing parsed documents.

    Selects the target elements of a category and applies the category's
    registered rules to each of them. Findings come out in document order,
    and per element in rule registration order.
    """

    def __init__(self):
        """Initializes the engine by discovering and loading all available rule sets."""
        DOMRegistry.discover()

    def run_audit(self, doc: HTMLDocument, category: str) -> Tuple[List[AccessibilityIssue], int]:
        """
        Runs the rule set of one category on a parsed HTMLDocument.

        Args:
            doc (HTMLDocument): The parsed document, including its original source.
            category (str): The element category ('nav' or 'dropdown').

        Returns:
            Tuple[List[AccessibilityIssue], int]: The findings, enriched with
            source positions where they could be resolved, and the number of
            target elements that were checked.
        """
        definition = DOMRegistry.get_definition(category)
        targets = definition.selector(doc)
        findings: List[AccessibilityIssue] = []

        # Positions are resolved at most once per element
        positions: Dict[Element, Optional[SourcePosition]] = {}

        for element in targets:
            for rule in definition.rules:
                issue = rule(element)
                if issue is None:
                    continue

                if element not in positions:
                    positions[element] = get_element_position(element, doc.source)
                position = positions[element]

                update = {"rule_id": rule.id}
                if position is not None:
                    update["line"] = position.line
                    update["column"] = position.column
                findings.append(issue.model_copy(update=update))

        logger.debug(
            "Audited %d %s element(s): %d finding(s)", len(targets), category, len(findings)
        )
        return findings, len(targets)
