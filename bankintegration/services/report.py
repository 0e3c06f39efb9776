"""Account report retrieval flow"""

import logging
from datetime import datetime
from typing import Optional

from bankintegration.domain.date_range import DateInput, resolve_date_range
from bankintegration.domain.models import ErpCredentials, SigningContext
from bankintegration.infrastructure.clients.report import ReportClient

logger = logging.getLogger(__name__)


async def fetch_account_report(
    credentials: ErpCredentials,
    account: str,
    integration_code: str,
    explicit_from: DateInput = None,
    explicit_to: DateInput = None,
    client: Optional[ReportClient] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Fetch raw report entries for one account.

    Flow:
    1. Build a signing context (fresh request id, current UTC time)
    2. Resolve the report window against the context timestamp
    3. Send the signed request and return the body verbatim
    """
    ctx = SigningContext.create(credentials, account, integration_code, now=now)
    date_range = resolve_date_range(ctx.timestamp, explicit_from, explicit_to)
    logger.info(
        "Fetching account report",
        extra={
            "request_id": ctx.request_id,
            "account": account,
            "from": date_range.from_date.isoformat(),
            "to": date_range.to_date.isoformat(),
        },
    )
    return await (client or ReportClient()).fetch_entries(ctx, date_range)
