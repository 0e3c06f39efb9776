"""Integration tests for the report client against a mocked API"""

import json
import httpx
import pytest
from dataclasses import replace
from datetime import date, datetime, timezone
from bankintegration.domain.exceptions import HttpStatusError, MalformedKeyMaterialError, NetworkError
from bankintegration.domain.models import DateRange
from bankintegration.infrastructure.clients.report import ReportClient
from bankintegration.services.report import fetch_account_report

REPORT_URL = "https://api.bankintegration.dk/report/account"
ENTRIES_BODY = '{"entries":[{"date":"2025-01-02","amount":-120.5,"text":"Kantine"}]}'


class RecordingAPI:
    """Mock transport handler that records every request"""

    def __init__(self, status_code: int = 200, body: str = ENTRIES_BODY, error: Exception | None = None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    def client(self) -> ReportClient:
        return ReportClient(report_url=REPORT_URL, timeout=5.0, transport=httpx.MockTransport(self))


@pytest.fixture
def january() -> DateRange:
    return DateRange(date(2025, 1, 1), date(2025, 1, 31))


async def test_fetch_entries_returns_body_verbatim(signing_context, january):
    api = RecordingAPI()

    body = await api.client().fetch_entries(signing_context, january)

    assert body == ENTRIES_BODY


async def test_fetch_entries_request_shape(signing_context, january, reference_header):
    api = RecordingAPI()

    await api.client().fetch_entries(signing_context, january)

    assert len(api.requests) == 1
    request = api.requests[0]
    assert request.method == "POST"
    assert str(request.url) == REPORT_URL
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Authorization"] == f"BASIC {reference_header}"
    assert json.loads(request.content) == {
        "requestId": "r1",
        "from": "2025-01-01",
        "to": "2025-01-31",
        "newOnly": False,
    }


@pytest.mark.parametrize("status_code", [400, 401, 404, 500, 503])
async def test_non_2xx_fails_without_retry(signing_context, january, status_code):
    api = RecordingAPI(status_code=status_code, body='{"error": "ignored"}')

    with pytest.raises(HttpStatusError) as exc_info:
        await api.client().fetch_entries(signing_context, january)

    assert exc_info.value.status_code == status_code
    assert len(api.requests) == 1


async def test_connection_failure_is_network_error(signing_context, january):
    api = RecordingAPI(error=httpx.ConnectError("connection refused"))

    with pytest.raises(NetworkError):
        await api.client().fetch_entries(signing_context, january)
    assert len(api.requests) == 1


async def test_timeout_is_network_error(signing_context, january):
    api = RecordingAPI(error=httpx.ReadTimeout("timed out"))

    with pytest.raises(NetworkError, match="timeout"):
        await api.client().fetch_entries(signing_context, january)


async def test_malformed_key_fails_before_request(signing_context, january):
    api = RecordingAPI()

    with pytest.raises(MalformedKeyMaterialError):
        await api.client().fetch_entries(replace(signing_context, erp_id="ERP-KEY"), january)
    assert api.requests == []


async def test_fetch_account_report_resolves_window(credentials):
    api = RecordingAPI()
    now = datetime(2025, 1, 15, 10, 0, 0, tzinfo=timezone.utc)

    body = await fetch_account_report(credentials, "12345678", "ABC123", client=api.client(), now=now)

    assert body == ENTRIES_BODY
    payload = json.loads(api.requests[0].content)
    assert payload["from"] == "2025-01-01"
    assert payload["to"] == "2025-01-31"


async def test_fetch_account_report_fresh_request_ids(credentials):
    api = RecordingAPI()
    client = api.client()

    await fetch_account_report(credentials, "12345678", "ABC123", "2025-03-05", client=client)
    await fetch_account_report(credentials, "12345678", "ABC123", "2025-03-05", client=client)

    first, second = (json.loads(r.content) for r in api.requests)
    assert first["requestId"] != second["requestId"]
    assert first["to"] == "2025-03-31"
