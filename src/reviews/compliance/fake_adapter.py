"""Configurable fake compliance gateway for development and testing.

Returns a fixed verdict without any external call. Tests configure it to
approve, reject, flag, or behave as if the compliance service were down.
"""

from reviews.compliance.port import ComplianceGateway, ValidationVerdict, VerdictRequest


class FakeComplianceGateway(ComplianceGateway):
    """Configurable fake compliance gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Validation service unavailable"
        self.is_valid: bool = True
        self.level: int = 1
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.calls: list[VerdictRequest] = []

    def configure(
        self,
        is_valid: bool = True,
        errors: list[str] | None = None,
        warnings: list[str] | None = None,
        level: int = 1,
        should_succeed: bool = True,
        failure_reason: str = "Validation service unavailable",
    ) -> None:
        """Configure the verdict returned by subsequent calls."""
        self.is_valid = is_valid
        self.errors = list(errors or [])
        self.warnings = list(warnings or [])
        self.level = level
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def validate_review(self, request: VerdictRequest) -> ValidationVerdict:
        self.calls.append(request)

        if not self.should_succeed:
            return ValidationVerdict.unavailable(self.failure_reason)

        return ValidationVerdict(
            is_valid=self.is_valid,
            level=self.level,
            errors=tuple(self.errors),
            warnings=tuple(self.warnings),
            executed_rules=("FakeRuleSet",),
        )
