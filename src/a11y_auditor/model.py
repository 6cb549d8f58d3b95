from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["error", "warning"]
Category = Literal["nav", "dropdown"]
NotificationType = Literal["diagnostic", "notification", "inline"]
CheckMode = Literal["realtime", "on-demand"]


class AccessibilityIssue(BaseModel):
    """
    Data model representing a single accessibility finding.
    Position and remediation fields are optional and may be stripped by the checker.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    element: Optional[str] = None  # tag name, e.g. 'nav', 'button'
    suggestion: Optional[str] = None
    example_code: Optional[str] = None
    rule_id: Optional[str] = None  # stamped by the engine, None for parse failures


class CheckSummary(BaseModel):
    """Counts derived from the final finding list of a check."""
    errors: int = 0
    warnings: int = 0
    elements_checked: int = 0


class CheckResult(BaseModel):
    """Ordered findings of one check plus their summary."""
    category: Optional[Category] = None
    issues: List[AccessibilityIssue] = Field(default_factory=list)
    summary: CheckSummary = Field(default_factory=CheckSummary)

    def issues_for(self, rule_id: str) -> List[AccessibilityIssue]:
        """Returns the findings produced by a single rule."""
        return [issue for issue in self.issues if issue.rule_id == rule_id]


class CheckOptions(BaseModel):
    """
    Caller options for a check. 'mode' is accepted for the host's benefit;
    realtime and on-demand checks run the identical rule set.
    """
    model_config = ConfigDict(frozen=True)

    provide_suggestions: bool = True
    mode: CheckMode = "on-demand"


class ToolParameters(BaseModel):
    """Arguments of a tool call as received by the host (camelCase on the wire)."""
    model_config = ConfigDict(populate_by_name=True)

    content: str
    mode: CheckMode = "on-demand"
    notification_type: NotificationType = Field(default="diagnostic", alias="notificationType")
    provide_suggestions: bool = Field(default=True, alias="provideSuggestions")

    def to_options(self) -> CheckOptions:
        return CheckOptions(provide_suggestions=self.provide_suggestions, mode=self.mode)
