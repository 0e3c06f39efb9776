"""Request signing for the bankintegration.dk report API.

The Authorization header value is built as follows:

1. token   = hex SHA-256 of the integration code
2. payload = token#account#currency#requestId#payDate#amount#credAccount#erpName#payId#yyyyMMddHHmmss
             (currency, payDate, amount, credAccount are always empty; payId == requestId)
3. key     = erp_id GUID in mixed-endian byte layout
4. hash    = Base64(HMAC-SHA-256(key, payload))
5. header  = Base64(compact JSON of the AuthEnvelope carrying that hash)

Every byte matters: the server rejects a bad signature without detail.
"""

import base64
import hashlib
import hmac
import json
import logging
import uuid
from datetime import datetime

from bankintegration.domain.exceptions import MalformedKeyMaterialError
from bankintegration.domain.models import SigningContext, to_utc
from bankintegration.protocol.schemas import AuthEnvelope, AuthorizationHash

logger = logging.getLogger(__name__)

ENVELOPE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
PAYLOAD_TIME_FORMAT = "%Y%m%d%H%M%S"


def guid_key_bytes(erp_id: str) -> bytes:
    """
    Serialize a GUID string to its 16-byte mixed-endian layout.

    The first three groups (4, 2, 2 bytes) are little-endian, the last
    8 bytes big-endian. This is the HMAC key, not the UTF-8 text.

    Raises:
        MalformedKeyMaterialError: If erp_id is not a 128-bit identifier
    """
    try:
        return uuid.UUID(erp_id.strip()).bytes_le
    except (ValueError, AttributeError, TypeError) as e:
        raise MalformedKeyMaterialError(f"erp_id is not a valid GUID: {erp_id!r}") from e


def integration_token(integration_code: str) -> str:
    """Lowercase hex SHA-256 of the UTF-8 encoded integration code"""
    return hashlib.sha256(integration_code.encode("utf-8")).hexdigest()


def build_payload(token: str, account: str, request_id: str, erp_name: str, timestamp: datetime) -> str:
    # Payment fields stay empty for report queries
    currency = ""
    pay_date = ""
    amount = ""
    cred_account = ""
    pay_id = request_id
    stamp = to_utc(timestamp).strftime(PAYLOAD_TIME_FORMAT)
    return "#".join(
        [token, account, currency, request_id, pay_date, amount, cred_account, erp_name, pay_id, stamp]
    )


def compute_hash(key: bytes, payload: str) -> str:
    """Base64 of HMAC-SHA-256 over the UTF-8 payload"""
    digest = hmac.new(key, payload.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def sign(ctx: SigningContext) -> str:
    """Compute the hash entry value for ctx"""
    # Validate the key before hashing anything
    key = guid_key_bytes(ctx.erp_id)
    payload = build_payload(
        integration_token(ctx.integration_code),
        ctx.account,
        ctx.request_id,
        ctx.erp_name,
        ctx.timestamp,
    )
    logger.debug("Payload for hash calculation", extra={"request_id": ctx.request_id, "payload": payload})
    return compute_hash(key, payload)


def build_envelope(ctx: SigningContext) -> AuthEnvelope:
    return AuthEnvelope(
        service_provider=ctx.erp_name,
        account=ctx.account,
        time=to_utc(ctx.timestamp).strftime(ENVELOPE_TIME_FORMAT),
        request_id=ctx.request_id,
        hashes=[AuthorizationHash(id=ctx.request_id, hash=sign(ctx))],
    )


def serialize_envelope(envelope: AuthEnvelope) -> str:
    """Compact JSON, non-ASCII characters left unescaped"""
    return json.dumps(envelope.model_dump(by_alias=True), separators=(",", ":"), ensure_ascii=False)


def compute_authorization_header(ctx: SigningContext) -> str:
    """
    Build the value for `Authorization: BASIC <value>`.

    Deterministic for identical inputs.

    Raises:
        MalformedKeyMaterialError: If ctx.erp_id is not a valid GUID
    """
    envelope_json = serialize_envelope(build_envelope(ctx))
    logger.debug("Authentication envelope", extra={"request_id": ctx.request_id, "envelope": envelope_json})
    return base64.b64encode(envelope_json.encode("utf-8")).decode("ascii")
