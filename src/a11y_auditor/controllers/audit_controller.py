import logging
from typing import List, Optional

from a11y_auditor.dom.builder import DOMBuilder
from a11y_auditor.dom.core import ParseError
from a11y_auditor.dom.qngine import QNGINE
from a11y_auditor.model import AccessibilityIssue, CheckOptions, CheckResult, CheckSummary

logger = logging.getLogger(__name__)

# Remediation fields dropped when suggestions are switched off
SUGGESTION_FIELDS = ("suggestion", "example_code")


class AuditController:
    """
    Orchestrates a single accessibility check: parse, audit, strip, summarize.

    Each call builds and discards its own document, so one controller can be
    shared between concurrent callers.
    """

    def __init__(self):
        self.builder = DOMBuilder()
        self.engine = QNGINE()

    def check(self, category: str, markup: str, options: Optional[CheckOptions] = None) -> CheckResult:
        """
        Checks one element category of a markup fragment.

        Parse failures are converted into a single error finding; this method
        never raises for bad markup.
        """
        options = options or CheckOptions()

        try:
            doc = self.builder.parse_doc(markup)
        except ParseError as e:
            logger.debug("Parse failure during %s check: %s", category, e)
            issues = [AccessibilityIssue(
                severity="error",
                message=f"Failed to parse HTML: {e}",
                suggestion="Please check that the provided content is valid HTML",
            )]
            return self._build_result(category, self._apply_options(issues, options), elements_checked=0)

        issues, elements_checked = self.engine.run_audit(doc, category)
        return self._build_result(category, self._apply_options(issues, options), elements_checked)

    def check_navigation(self, markup: str, options: Optional[CheckOptions] = None) -> CheckResult:
        return self.check("nav", markup, options)

    def check_dropdowns(self, markup: str, options: Optional[CheckOptions] = None) -> CheckResult:
        return self.check("dropdown", markup, options)

    @staticmethod
    def _apply_options(issues: List[AccessibilityIssue], options: CheckOptions) -> List[AccessibilityIssue]:
        """Strips remediation payload when suggestions are disabled. Findings themselves are kept."""
        if options.provide_suggestions:
            return issues
        return [issue.model_copy(update={field: None for field in SUGGESTION_FIELDS}) for issue in issues]

    @staticmethod
    def _build_result(category: str, issues: List[AccessibilityIssue], elements_checked: int) -> CheckResult:
        """Derives the summary strictly from the final finding list."""
        summary = CheckSummary(
            errors=sum(1 for issue in issues if issue.severity == "error"),
            warnings=sum(1 for issue in issues if issue.severity == "warning"),
            elements_checked=elements_checked,
        )
        return CheckResult(category=category, issues=issues, summary=summary)
