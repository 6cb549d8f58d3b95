# tests/auditor/test_report_controller.py
import pytest

from a11y_auditor.controllers.report_controller import ReportController
from a11y_auditor.facade import check_navigation, format_result
from a11y_auditor.model import AccessibilityIssue, CheckResult, CheckSummary


@pytest.fixture
def reporter():
    return ReportController()


@pytest.fixture
def dropdown_result():
    """A hand-built result with one positioned error and one bare warning."""
    return CheckResult(
        category="dropdown",
        issues=[
            AccessibilityIssue(
                severity="error",
                message="First problem",
                line=3,
                column=5,
                element="button",
                suggestion="Fix it",
                example_code="<button>\n  Menu\n</button>",
            ),
            AccessibilityIssue(severity="warning", message="Second problem", element="button"),
        ],
        summary=CheckSummary(errors=1, warnings=1, elements_checked=2),
    )


def test_diagnostic_layout(reporter, dropdown_result):
    expected = "\n".join([
        "🔍 Dropdown Accessibility Report",
        "Elements checked: 2",
        "Errors: 1 | Warnings: 1",
        "",
        "❌ ERROR (Line 3, Col 5): First problem",
        "   💡 Fix it",
        "   📝 Example:",
        "      <button>",
        "        Menu",
        "      </button>",
        "",
        "⚠️ WARNING: Second problem",
    ])
    assert reporter.format(dropdown_result, "diagnostic") == expected


def test_notification_layout(reporter, dropdown_result):
    assert reporter.format(dropdown_result, "notification") == (
        "Dropdown A11y: 1 errors, 1 warnings\n"
        "• First problem\n"
        "• ... and 1 more issues"
    )


def test_notification_single_issue(reporter, dropdown_result):
    single = dropdown_result.model_copy(update={"issues": dropdown_result.issues[:1]})
    assert reporter.format(single, "notification") == "Dropdown A11y: 1 errors, 1 warnings\n• First problem"


def test_inline_layout(reporter, dropdown_result):
    assert reporter.format(dropdown_result, "inline") == "❌ First problem (Fix it)\n⚠️ Second problem"


def test_line_without_column(reporter):
    result = CheckResult(
        category="nav",
        issues=[AccessibilityIssue(severity="error", message="Oops", line=7)],
        summary=CheckSummary(errors=1, elements_checked=1),
    )
    assert "❌ ERROR (Line 7): Oops" in reporter.format(result, "diagnostic")


@pytest.mark.parametrize("style", ["diagnostic", "notification", "inline"])
def test_success_line_for_every_style(reporter, style):
    result = CheckResult(category="nav", summary=CheckSummary(elements_checked=3))
    assert reporter.format(result, style) == "✅ No accessibility issues found in 3 navigation element(s)"


def test_success_line_for_dropdowns(reporter):
    result = CheckResult(category="dropdown", summary=CheckSummary(elements_checked=0))
    assert reporter.format(result) == "✅ No accessibility issues found in 0 dropdown button(s)"


def test_result_without_category(reporter):
    result = CheckResult(
        issues=[AccessibilityIssue(severity="warning", message="Hmm")],
        summary=CheckSummary(warnings=1),
    )
    assert reporter.format(result, "notification").startswith("A11y: 0 errors, 1 warnings")


def test_unknown_style(reporter, dropdown_result):
    with pytest.raises(ValueError, match="Unknown notification style"):
        reporter.format(dropdown_result, "popup")


@pytest.mark.parametrize("style", ["diagnostic", "notification", "inline"])
def test_formatting_is_idempotent(style):
    """Formatting the same result twice gives byte-identical output."""
    result = check_navigation('<nav></nav>\n<nav aria-label="x"><a href="/">Home</a></nav>')
    assert format_result(result, style) == format_result(result, style)


def test_stripped_result_renders_without_suggestions():
    from a11y_auditor.model import CheckOptions

    result = check_navigation("<nav></nav>", CheckOptions(provide_suggestions=False))
    text = format_result(result, "diagnostic")
    assert "💡" not in text
    assert "📝" not in text
    assert "❌ ERROR (Line 1, Col 1): Navigation element is missing aria-label or aria-labelledby attribute" in text
