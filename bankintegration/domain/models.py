"""Domain models - pure Python dataclasses representing request-scoped values"""

import uuid
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional


def to_utc(moment: datetime) -> datetime:
    """Normalize to an aware UTC datetime (naive values are taken as UTC)"""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


@dataclass(frozen=True)
class ErpCredentials:
    """Vendor-issued identity of the integrating ERP system"""

    erp_id: str  # API key, a GUID string
    erp_name: str


@dataclass(frozen=True)
class SigningContext:
    """Everything needed to sign one report request"""

    erp_id: str
    erp_name: str
    account: str
    integration_code: str
    request_id: str
    timestamp: datetime

    @classmethod
    def create(
        cls,
        credentials: ErpCredentials,
        account: str,
        integration_code: str,
        now: Optional[datetime] = None,
        request_id: Optional[str] = None,
    ) -> "SigningContext":
        """Build a context with a fresh request id and the current UTC instant"""
        return cls(
            erp_id=credentials.erp_id,
            erp_name=credentials.erp_name,
            account=account,
            integration_code=integration_code,
            request_id=request_id or str(uuid.uuid4()),
            timestamp=to_utc(now or datetime.now(timezone.utc)),
        )


@dataclass(frozen=True)
class DateRange:
    """Inclusive report window; ordering is not enforced"""

    from_date: date
    to_date: date

    @property
    def is_ordered(self) -> bool:
        return self.from_date <= self.to_date
