"""Compliance gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- FakeComplianceGateway for development and testing (default)
- HttpComplianceGateway when COMPLIANCE_ADAPTER=http
"""

from reviews.compliance.port import ComplianceGateway
from reviews.config import get_settings

_current_gateway: ComplianceGateway | None = None


def get_gateway() -> ComplianceGateway:
    """Return the current compliance gateway."""
    global _current_gateway
    if _current_gateway is None:
        settings = get_settings()
        if settings.compliance_adapter == "fake":
            from reviews.compliance.fake_adapter import FakeComplianceGateway

            _current_gateway = FakeComplianceGateway()
        elif settings.compliance_adapter == "http":
            from reviews.compliance.http_adapter import HttpComplianceGateway

            _current_gateway = HttpComplianceGateway(
                base_url=settings.compliance_service_url,
                timeout=settings.collaborator_timeout_seconds,
            )
        else:
            raise ValueError(f"Unknown compliance adapter: {settings.compliance_adapter}")
    return _current_gateway


def set_gateway(gateway: ComplianceGateway) -> None:
    """Override the active compliance gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to the configured default gateway."""
    global _current_gateway
    _current_gateway = None
