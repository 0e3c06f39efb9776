"""Pydantic schemas for the bankintegration.dk wire format"""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class AuthorizationHash(BaseModel):
    """Single signed hash entry, keyed by request id"""

    id: str
    hash: str


class AuthEnvelope(BaseModel):
    """Authentication object carried Base64-encoded in the Authorization header"""

    model_config = ConfigDict(populate_by_name=True)

    # Field order is the serialized property order
    service_provider: str = Field(..., alias="serviceProvider")
    account: str
    time: str = Field(..., description="yyyy-MM-ddTHH:mm:ss, UTC, no suffix")
    request_id: str = Field(..., alias="requestId")
    hashes: List[AuthorizationHash] = Field(..., alias="hash", min_length=1)


class ReportRequest(BaseModel):
    """Request body for POST /report/account"""

    model_config = ConfigDict(populate_by_name=True)

    request_id: str = Field(..., alias="requestId")
    from_date: date = Field(..., alias="from")
    to_date: date = Field(..., alias="to")
    new_only: bool = Field(False, alias="newOnly")
