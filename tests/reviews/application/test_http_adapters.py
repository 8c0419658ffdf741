"""Application tests for the HTTP collaborator adapters."""

from unittest.mock import MagicMock

import pytest
import requests
from reviews.compliance.http_adapter import HttpComplianceGateway
from reviews.compliance.port import VerdictRequest
from reviews.directory.http_adapter import HttpDirectory
from reviews.directory.port import DirectoryUnavailableError
from reviews.notifier.http_adapter import HttpReviewNotifier


def _response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def _request():
    return VerdictRequest(
        review_id="r-1",
        business_id="b-1",
        star_rating=4,
        review_body="A good place to work from with decent wifi.",
        is_guest_user=True,
        email="guest@example.com",
    )


class TestHttpComplianceGateway:
    def _gateway(self, session):
        return HttpComplianceGateway(base_url="http://compliance:5100/", timeout=2.0, session=session)

    def test_posts_request_and_parses_verdict(self):
        session = MagicMock()
        session.post.return_value = _response(
            payload={"isValid": True, "level": 1, "errors": [], "warnings": ["new device"]}
        )

        verdict = self._gateway(session).validate_review(_request())

        assert verdict.is_valid is True
        assert verdict.warnings == ("new device",)
        url = session.post.call_args.args[0]
        assert url == "http://compliance:5100/api/compliance/validate-review"
        assert session.post.call_args.kwargs["json"]["reviewId"] == "r-1"
        assert session.post.call_args.kwargs["timeout"] == 2.0

    @pytest.mark.parametrize(
        ("side_effect", "reason"),
        [
            (requests.Timeout(), "Validation service timed out"),
            (requests.ConnectionError(), "Network error contacting validation service"),
            (RuntimeError("boom"), "Unexpected validation error: RuntimeError"),
        ],
    )
    def test_transport_failures(self, side_effect, reason):
        session = MagicMock()
        session.post.side_effect = side_effect

        verdict = self._gateway(session).validate_review(_request())

        assert verdict.is_valid is False
        assert verdict.level == 0
        assert verdict.errors == (reason,)

    def test_error_status(self):
        session = MagicMock()
        session.post.return_value = _response(status_code=503)

        verdict = self._gateway(session).validate_review(_request())

        assert verdict.errors == ("Validation service unavailable",)

    def test_unparsable_body(self):
        session = MagicMock()
        session.post.return_value = _response(json_error=ValueError("not json"))

        verdict = self._gateway(session).validate_review(_request())

        assert verdict.errors == ("Invalid validation response",)

    def test_malformed_verdict(self):
        session = MagicMock()
        session.post.return_value = _response(payload={"valid": True})

        verdict = self._gateway(session).validate_review(_request())

        assert verdict.is_valid is False
        assert verdict.errors == ("Invalid validation response",)


class TestHttpDirectory:
    def _directory(self, session):
        return HttpDirectory(
            business_url="http://business:5300",
            location_url="http://location:5400",
            user_url="http://user:5500",
            timeout=1.0,
            session=session,
        )

    def test_business_exists(self):
        session = MagicMock()
        session.get.return_value = _response(200)

        assert self._directory(session).business_exists("b-1") is True
        assert session.get.call_args.args[0] == "http://business:5300/api/Business/b-1"

    def test_location_missing(self):
        session = MagicMock()
        session.get.return_value = _response(404)

        assert self._directory(session).location_exists("l-1") is False
        assert session.get.call_args.args[0] == "http://location:5400/api/locations/l-1"

    def test_unexpected_status_is_unavailable(self):
        session = MagicMock()
        session.get.return_value = _response(500)

        with pytest.raises(DirectoryUnavailableError):
            self._directory(session).user_exists("u-1")

    def test_network_error_is_unavailable(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError()

        with pytest.raises(DirectoryUnavailableError):
            self._directory(session).business_exists("b-1")


class TestHttpReviewNotifier:
    def _notifier(self, session):
        return HttpReviewNotifier(base_url="http://notify:5200", timeout=1.0, session=session)

    def test_rejected_carries_reasons(self):
        session = MagicMock()
        session.post.return_value = _response(200)

        result = self._notifier(session).send_review_rejected("a@b.com", "r-1", ["spam"])

        assert result["status"] == "sent"
        assert session.post.call_args.args[0] == "http://notify:5200/api/notification/review-rejected"
        assert session.post.call_args.kwargs["json"] == {"email": "a@b.com", "reviewId": "r-1", "reasons": ["spam"]}

    def test_error_status_reports_failure(self):
        session = MagicMock()
        session.post.return_value = _response(500)

        result = self._notifier(session).send_review_approved("a@b.com", "r-1")

        assert result["status"] == "failed"

    def test_network_error_reports_failure(self):
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("refused")

        result = self._notifier(session).send_review_flagged("a@b.com", "r-1")

        assert result["status"] == "failed"
