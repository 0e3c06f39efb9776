"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from bankintegration.domain.models import ErpCredentials, SigningContext


# Reference vector shared by the signing and client tests
REFERENCE_ERP_ID = "00000000-0000-0000-0000-000000000001"
REFERENCE_HASH = "xDm6dhvNJGt2IDN1kJ51/7jVeW6ukLDnJFaHlV4Wnw4="
REFERENCE_HEADER = (
    "eyJzZXJ2aWNlUHJvdmlkZXIiOiJUZXN0RVJQIiwiYWNjb3VudCI6IjEyMzQ1Njc4IiwidGltZSI6IjIwMjUtMDEtMDFUMDA6MDA6MDAiLCJy"
    "ZXF1ZXN0SWQiOiJyMSIsImhhc2giOlt7ImlkIjoicjEiLCJoYXNoIjoieERtNmRodk5KR3QySUROMWtKNTEvN2pWZVc2dWtMRG5KRmFIbFY0"
    "V253ND0ifV19"
)


@pytest.fixture
def reference_time() -> datetime:
    return datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def credentials() -> ErpCredentials:
    return ErpCredentials(erp_id=REFERENCE_ERP_ID, erp_name="TestERP")


@pytest.fixture
def signing_context(credentials: ErpCredentials, reference_time: datetime) -> SigningContext:
    """Context matching the published reference vector"""
    return SigningContext.create(
        credentials,
        account="12345678",
        integration_code="ABC123",
        now=reference_time,
        request_id="r1",
    )


@pytest.fixture
def reference_hash() -> str:
    return REFERENCE_HASH


@pytest.fixture
def reference_header() -> str:
    return REFERENCE_HEADER
