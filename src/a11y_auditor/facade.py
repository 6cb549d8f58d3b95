"""
Entry points for host collaborators (HTTP server, CLI, editor integrations).

The controllers are created lazily and shared: they hold no per-call state.
"""
from functools import lru_cache
from typing import Optional

from a11y_auditor.controllers.audit_controller import AuditController
from a11y_auditor.controllers.report_controller import ReportController
from a11y_auditor.model import CheckOptions, CheckResult


@lru_cache(maxsize=None)
def _audit_controller() -> AuditController:
    return AuditController()


@lru_cache(maxsize=None)
def _report_controller() -> ReportController:
    return ReportController()


def check_navigation(markup: str, options: Optional[CheckOptions] = None) -> CheckResult:
    """Checks every <nav> landmark in the markup."""
    return _audit_controller().check_navigation(markup, options)


def check_dropdowns(markup: str, options: Optional[CheckOptions] = None) -> CheckResult:
    """Checks every dropdown trigger (aria-expanded / aria-haspopup) in the markup."""
    return _audit_controller().check_dropdowns(markup, options)


def check(category: str, markup: str, options: Optional[CheckOptions] = None) -> CheckResult:
    return _audit_controller().check(category, markup, options)


def format_result(result: CheckResult, style: str = "diagnostic") -> str:
    """Renders a result as 'diagnostic', 'notification' or 'inline' text."""
    return _report_controller().format(result, style)
