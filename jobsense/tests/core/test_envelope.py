"""Unit tests for result envelopes."""

import json
from datetime import datetime, timedelta, timezone

from jobsense.core.envelope import (
    FailureWording,
    failure_envelope,
    render_json,
    success_envelope,
    utc_now_iso,
)
from jobsense.core.models import (
    FailureKind,
    ToolConfiguration,
    WebhookFailure,
    WebhookResponse,
)

WORDING = FailureWording(
    timeout_error="Thing timeout",
    timeout_message="Did not finish within {timeout}ms.",
    unreachable_error="Cannot reach thing",
    unreachable_message="Unable to connect.",
    upstream_error="Thing failed",
)

CONFIG = ToolConfiguration(endpoint_url="https://n8n.example/webhook/jobs", timeout_ms=1500)


class TestTimestamps:
    def test_millisecond_precision_with_z_suffix(self) -> None:
        moment = datetime(2026, 3, 1, 9, 30, 5, 123456, tzinfo=timezone.utc)
        assert utc_now_iso(moment) == "2026-03-01T09:30:05.123Z"

    def test_converts_to_utc(self) -> None:
        moment = datetime(2026, 3, 1, 13, 0, 0, tzinfo=timezone(timedelta(hours=4)))
        assert utc_now_iso(moment) == "2026-03-01T09:00:00.000Z"

    def test_defaults_to_now(self) -> None:
        assert utc_now_iso().endswith("Z")


class TestRenderJson:
    def test_two_space_indent(self) -> None:
        assert render_json({"a": [1]}) == '{\n  "a": [\n    1\n  ]\n}'

    def test_keeps_unicode(self) -> None:
        assert "თბილისი" in render_json({"location": "თბილისი"})


class TestSuccessEnvelope:
    def test_wraps_upstream_body(self) -> None:
        response = WebhookResponse(status=200, status_text="OK", body={"jobs": []})

        envelope = success_envelope(response, "job_search", executed_at="2026-01-01T00:00:00.000Z")

        assert envelope == {
            "success": True,
            "workflow": "job_search",
            "result": {"jobs": []},
            "executedAt": "2026-01-01T00:00:00.000Z",
            "status": 200,
        }

    def test_default_workflow_name(self) -> None:
        response = WebhookResponse(status=201, status_text="Created", body="ok")
        envelope = success_envelope(response, None)
        assert envelope["workflow"] == "default"
        assert envelope["status"] == 201


class TestFailureEnvelope:
    def test_timeout(self) -> None:
        failure = WebhookFailure(kind=FailureKind.TIMEOUT, message="timed out")

        envelope = failure_envelope(failure, WORDING, CONFIG)

        assert envelope == {
            "success": False,
            "error": "Thing timeout",
            "message": "Did not finish within 1500ms.",
            "timeout": 1500,
        }

    def test_unreachable_includes_url(self) -> None:
        failure = WebhookFailure(kind=FailureKind.UNREACHABLE, message="refused")

        envelope = failure_envelope(failure, WORDING, CONFIG)

        assert envelope["error"] == "Cannot reach thing"
        assert envelope["webhookUrl"] == "https://n8n.example/webhook/jobs"
        assert "timeout" not in envelope

    def test_upstream_includes_status_and_details(self) -> None:
        failure = WebhookFailure(
            kind=FailureKind.UPSTREAM,
            message="Request failed with status code 502",
            status=502,
            status_text="Bad Gateway",
            details={"reason": "workflow crashed"},
        )

        envelope = failure_envelope(failure, WORDING, CONFIG)

        assert envelope == {
            "success": False,
            "error": "Thing failed",
            "message": "Request failed with status code 502",
            "status": 502,
            "statusText": "Bad Gateway",
            "details": {"reason": "workflow crashed"},
        }

    def test_unknown_includes_type(self) -> None:
        failure = WebhookFailure(
            kind=FailureKind.UNKNOWN, message="bad url", error_type="InvalidURL"
        )

        envelope = failure_envelope(failure, WORDING, CONFIG)

        assert envelope == {
            "success": False,
            "error": "Unknown error occurred",
            "message": "bad url",
            "type": "InvalidURL",
        }

    def test_envelopes_are_json_serializable(self) -> None:
        failure = WebhookFailure(kind=FailureKind.UPSTREAM, message="m", status=500, details="oops")
        assert json.loads(render_json(failure_envelope(failure, WORDING, CONFIG)))["details"] == "oops"
