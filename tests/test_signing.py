import hashlib
import hmac

import pytest

from aws_sigv4_signer.exceptions import SigningError
from aws_sigv4_signer.scope import CredentialScope
from aws_sigv4_signer.signing import (
    EMPTY_SHA256,
    build_string_to_sign,
    compute_signature,
    derive_signing_key,
    hmac_sha256,
    sha256_hex,
)


def test_sha256_hex():
    assert sha256_hex("") == EMPTY_SHA256
    assert sha256_hex(b"hello world") == hashlib.sha256(b"hello world").hexdigest()
    assert sha256_hex("hello world") == sha256_hex(b"hello world")


def test_hmac_sha256():
    result = hmac_sha256(b"test-key", "test-data")

    assert isinstance(result, bytes)
    assert len(result) == 32
    assert result == hmac.new(b"test-key", b"test-data", hashlib.sha256).digest()


def test_derive_signing_key_documented_example():
    # https://docs.aws.amazon.com/general/latest/gr/signature-v4-examples.html
    scope = CredentialScope("20120215", "iam", "us-east-1")

    key = derive_signing_key("wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY", scope)

    assert key.hex() == (
        "f4780e2d9f65fa895f9c67b32ce1baf0b0d8a43505a000a1a9e090d414db404d"
    )


def test_derive_signing_key_follows_chain():
    scope = CredentialScope("20150830", "service", "us-east-1")

    k_date = hmac.new(b"AWS4secret", b"20150830", hashlib.sha256).digest()
    k_region = hmac.new(k_date, b"us-east-1", hashlib.sha256).digest()
    k_service = hmac.new(k_region, b"service", hashlib.sha256).digest()
    k_signing = hmac.new(k_service, b"aws4_request", hashlib.sha256).digest()

    assert derive_signing_key("secret", scope) == k_signing


def test_build_string_to_sign():
    canonical_request = "GET\n/\n\nhost:example.com\n\nhost\nUNSIGNED-PAYLOAD"

    string_to_sign = build_string_to_sign(
        "20150830T123600Z", "20150830/us-east-1/service/aws4_request", canonical_request
    )

    assert string_to_sign == (
        "AWS4-HMAC-SHA256\n"
        "20150830T123600Z\n"
        "20150830/us-east-1/service/aws4_request\n"
        + hashlib.sha256(canonical_request.encode()).hexdigest()
    )


def test_compute_signature_is_lowercase_hex():
    scope = CredentialScope("20150830", "service", "us-east-1")

    signature = compute_signature("secret", scope, "string to sign")

    assert len(signature) == 64
    assert signature == signature.lower()
    assert signature == (
        hmac.new(
            derive_signing_key("secret", scope), b"string to sign", hashlib.sha256
        ).hexdigest()
    )


def test_hmac_failure_raises_signing_error():
    with pytest.raises(SigningError, match="Error signing request"):
        hmac_sha256("not-bytes", "data")


def test_unencodable_value_raises_signing_error():
    with pytest.raises(SigningError, match="UTF-8"):
        hmac_sha256(b"key", "\ud800")
