import logging
from typing import List

from a11y_auditor.dom.registry import DOMRegistry
from a11y_auditor.model import AccessibilityIssue, CheckResult

logger = logging.getLogger(__name__)

ICONS = {"error": "❌", "warning": "⚠️"}
STYLES = ("diagnostic", "notification", "inline")

# Used when a result carries no category
FALLBACK_LABELS = ("Accessibility Report", "", "element(s)")


class ReportController:
    """
    Renders a CheckResult as text. Pure: formatting never re-runs a rule and
    keeps no state, so the same result and style always give the same text.
    """

    def format(self, result: CheckResult, style: str = "diagnostic") -> str:
        """
        Formats a result in one of the supported styles.

        Args:
            result (CheckResult): The result of a navigation or dropdown check.
            style (str): 'diagnostic', 'notification' or 'inline'.

        Returns:
            str: The rendered report, without trailing whitespace.
        """
        if style not in STYLES:
            raise ValueError(f"Unknown notification style: {style!r}. Expected one of {', '.join(STYLES)}")

        title, short_name, noun = self._labels(result)

        if not result.issues:
            return f"✅ No accessibility issues found in {result.summary.elements_checked} {noun}"

        if style == "diagnostic":
            lines = self._diagnostic(result, title)
        elif style == "notification":
            lines = self._notification(result, short_name)
        else:
            lines = [self._inline_line(issue) for issue in result.issues]

        return "\n".join(lines).strip()

    @staticmethod
    def _labels(result: CheckResult):
        if not result.category:
            return FALLBACK_LABELS
        definition = DOMRegistry.get_definition(result.category)
        return definition.title, definition.short_name, definition.noun

    @staticmethod
    def _position(issue: AccessibilityIssue) -> str:
        if not issue.line:
            return ""
        column = f", Col {issue.column}" if issue.column else ""
        return f" (Line {issue.line}{column})"

    def _diagnostic(self, result: CheckResult, title: str) -> List[str]:
        summary = result.summary
        lines = [
            f"🔍 {title}",
            f"Elements checked: {summary.elements_checked}",
            f"Errors: {summary.errors} | Warnings: {summary.warnings}",
            "",
        ]

        for index, issue in enumerate(result.issues):
            icon = ICONS[issue.severity]
            lines.append(f"{icon} {issue.severity.upper()}{self._position(issue)}: {issue.message}")

            if issue.suggestion:
                lines.append(f"   💡 {issue.suggestion}")

            if issue.example_code:
                lines.append("   📝 Example:")
                lines.extend(f"      {code_line}" for code_line in issue.example_code.split("\n"))

            if index < len(result.issues) - 1:
                lines.append("")

        return lines

    @staticmethod
    def _notification(result: CheckResult, short_name: str) -> List[str]:
        summary = result.summary
        lines = [
            f"{short_name} A11y: {summary.errors} errors, {summary.warnings} warnings".lstrip(),
            f"• {result.issues[0].message}",
        ]
        if len(result.issues) > 1:
            lines.append(f"• ... and {len(result.issues) - 1} more issues")
        return lines

    @staticmethod
    def _inline_line(issue: AccessibilityIssue) -> str:
        line = f"{ICONS[issue.severity]} {issue.message}"
        if issue.suggestion:
            line += f" ({issue.suggestion})"
        return line
