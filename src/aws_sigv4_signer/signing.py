"""Hashing primitives and the SigV4 signing key derivation."""

import hashlib
import hmac

from .exceptions import SigningError
from .scope import CredentialScope

AUTH_TAG = "AWS4"
ALGORITHM = f"{AUTH_TAG}-HMAC-SHA256"

EMPTY_SHA256 = hashlib.sha256(b"").hexdigest()
UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"


def _encode(value: str) -> bytes:
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SigningError("Unable to encode value as UTF-8") from e


def sha256_hex(data: str | bytes) -> str:
    if isinstance(data, str):
        data = _encode(data)
    return hashlib.sha256(data).hexdigest()


def hmac_sha256(key: bytes, data: str) -> bytes:
    try:
        return hmac.new(key, _encode(data), hashlib.sha256).digest()
    except (TypeError, ValueError) as e:
        raise SigningError("Error signing request") from e


def derive_signing_key(secret_key: str, scope: CredentialScope) -> bytes:
    k_secret = _encode(f"{AUTH_TAG}{secret_key}")
    k_date = hmac_sha256(k_secret, scope.date_without_timestamp)
    k_region = hmac_sha256(k_date, scope.region)
    k_service = hmac_sha256(k_region, scope.service)
    k_signing = hmac_sha256(k_service, CredentialScope.TERMINATION_STRING)
    return k_signing


def build_string_to_sign(
    date: str, credential_scope: str, canonical_request: str
) -> str:
    return "\n".join(
        [
            ALGORITHM,
            date,
            credential_scope,
            sha256_hex(canonical_request),
        ]
    )


def compute_signature(
    secret_key: str, scope: CredentialScope, string_to_sign: str
) -> str:
    signing_key = derive_signing_key(secret_key, scope)
    return hmac_sha256(signing_key, string_to_sign).hex()
