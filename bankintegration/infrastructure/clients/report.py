"""bankintegration.dk report API client"""

import time

import httpx

from bankintegration.config import settings
from bankintegration.domain.exceptions import HttpStatusError, NetworkError
from bankintegration.domain.models import DateRange, SigningContext
from bankintegration.infrastructure.observability.logging import log_fetch
from bankintegration.infrastructure.observability.metrics import record_fetch, report_fetch_latency_histogram
from bankintegration.protocol.schemas import ReportRequest
from bankintegration.protocol.signing import compute_authorization_header

AUTH_SCHEME = "BASIC"


class ReportClient:
    """Client for the signed account report endpoint"""

    def __init__(
        self,
        report_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.report_url = report_url or settings.report_api_url
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def fetch_entries(self, ctx: SigningContext, date_range: DateRange) -> str:
        """
        POST one signed report request and return the raw response body.

        Sent exactly once, no retry.

        Raises:
            MalformedKeyMaterialError: If ctx.erp_id is not a GUID (before any I/O)
            HttpStatusError: On a non-2xx response
            NetworkError: On timeout or transport failure
        """
        body = ReportRequest(
            request_id=ctx.request_id,
            from_date=date_range.from_date,
            to_date=date_range.to_date,
            new_only=False,
        )
        headers = {"Authorization": f"{AUTH_SCHEME} {compute_authorization_header(ctx)}"}

        start_time = time.time()
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with report_fetch_latency_histogram.time():
                    response = await client.post(
                        self.report_url,
                        json=body.model_dump(by_alias=True, mode="json"),
                        headers=headers,
                    )
                    response.raise_for_status()
            except httpx.HTTPStatusError as e:
                self._record(ctx, "http_error", start_time, e.response.status_code)
                raise HttpStatusError(e.response.status_code) from e
            except httpx.TimeoutException as e:
                self._record(ctx, "network_error", start_time)
                raise NetworkError(f"Report API timeout after {self.timeout}s") from e
            except httpx.RequestError as e:
                self._record(ctx, "network_error", start_time)
                raise NetworkError(f"Report API unreachable: {e}") from e

        self._record(ctx, "success", start_time, response.status_code)
        return response.text

    @staticmethod
    def _record(ctx: SigningContext, outcome: str, start_time: float, status_code: int | None = None) -> None:
        record_fetch(outcome)
        duration_ms = (time.time() - start_time) * 1000
        log_fetch(ctx.request_id, ctx.account, outcome, duration_ms, status_code)
