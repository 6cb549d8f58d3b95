# tests/auditor/test_audit_controller.py
import pytest

from a11y_auditor.controllers.audit_controller import AuditController
from a11y_auditor.model import CheckOptions, CheckResult


@pytest.fixture
def controller():
    return AuditController()


@pytest.mark.parametrize("category", ["nav", "dropdown"])
def test_no_targets_means_nothing_checked(controller, category):
    result = controller.check(category, "<main><p>Hello</p></main>")
    assert result.issues == []
    assert result.summary.elements_checked == 0
    assert result.category == category


def test_elements_checked_counts_targets_not_findings(controller):
    html = (
        '<nav aria-label="Main"><ul><li><a href="/">Home</a></li></ul></nav>'
        '<nav aria-label="Footer"><ul><li><a href="/c">Contact</a></li></ul></nav>'
        '<nav></nav>'
    )
    result = controller.check_navigation(html)
    assert result.summary.elements_checked == 3
    assert result.summary.errors == len([i for i in result.issues if i.severity == "error"])


def test_finding_order_is_document_then_rule_order(controller):
    html = '<nav></nav>\n<nav aria-labelledby="nope"></nav>'
    result = controller.check_navigation(html)
    assert [(i.rule_id, i.line) for i in result.issues] == [
        ("nav-requires-label", 1),
        ("nav-unique-labels", 1),
        ("nav-labelledby-target-exists", 2),
        ("nav-unique-labels", 2),
    ]
    assert all(issue.column == 1 for issue in result.issues)


def test_checks_are_deterministic(controller):
    html = '<button aria-expanded="maybe" aria-haspopup="true">☰</button>'
    assert controller.check_dropdowns(html) == controller.check_dropdowns(html)


def test_suggestions_stripped_but_counts_kept(controller):
    html = '<nav></nav><nav aria-label="x"><a href="/">Home</a></nav>'
    full = controller.check_navigation(html)
    bare = controller.check_navigation(html, CheckOptions(provide_suggestions=False))

    assert full.summary == bare.summary
    assert [i.message for i in full.issues] == [i.message for i in bare.issues]
    assert any(i.suggestion for i in full.issues)
    for issue in bare.issues:
        assert issue.suggestion is None
        assert issue.example_code is None


def test_mode_has_no_effect(controller):
    html = '<button aria-expanded="false">Menu</button>'
    realtime = controller.check_dropdowns(html, CheckOptions(mode="realtime"))
    on_demand = controller.check_dropdowns(html, CheckOptions(mode="on-demand"))
    assert realtime == on_demand


def test_parse_failure_becomes_single_finding(controller, monkeypatch):
    """Parser errors never escape the checker."""
    def exploding_soup(*args, **kwargs):
        raise RuntimeError("unterminated tag")

    monkeypatch.setattr("a11y_auditor.dom.builder.BeautifulSoup", exploding_soup)
    result = controller.check_navigation("<nav")

    assert isinstance(result, CheckResult)
    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.severity == "error"
    assert issue.message == "Failed to parse HTML: unterminated tag"
    assert issue.rule_id is None
    assert result.summary.errors == 1
    assert result.summary.warnings == 0
    assert result.summary.elements_checked == 0


def test_non_text_markup_becomes_single_finding(controller):
    result = controller.check_dropdowns(b"<button aria-expanded='x'>")
    assert len(result.issues) == 1
    assert result.issues[0].message.startswith("Failed to parse HTML:")
    assert result.summary.elements_checked == 0


def test_parse_failure_respects_suggestion_option(controller):
    result = controller.check_navigation(None, CheckOptions(provide_suggestions=False))
    assert result.issues[0].suggestion is None


@pytest.mark.parametrize("html", [
    '<nav aria-label="Main"><ul><li><a href="/">Home',
    '<nav aria-label="Main',
    '</div></nav><nav>',
    '<<<>>>',
])
def test_malformed_markup_never_raises(controller, html):
    result = controller.check_navigation(html)
    assert isinstance(result, CheckResult)
    assert result.summary.errors == len([i for i in result.issues if i.severity == "error"])


def test_document_is_not_mutated(controller):
    """Rules only read: running every rule leaves the parsed tree untouched."""
    html = '<h2 id="t">Site</h2><nav aria-label="Site"><a href="/">Home</a></nav>'
    doc = controller.builder.parse_doc(html)
    before = str(doc.soup)
    controller.engine.run_audit(doc, "nav")
    controller.engine.run_audit(doc, "dropdown")
    assert str(doc.soup) == before
