"""AWS Signature Version 4 signing of HTTP requests.

Two ways of presenting a signature are supported: the value of an
``Authorization`` header (:func:`build_auth_header`) and a pre-signed query
string (:func:`build_query_string`).
"""

import dataclasses
import enum
import logging
import urllib.parse
import warnings
from dataclasses import dataclass
from typing import Self

from .canonical import CanonicalRequest, HttpRequest
from .credentials import AwsCredentials, CredentialsProvider, CredentialsProviderChain
from .exceptions import SigningError
from .headers import CanonicalHeaders, Header
from .scope import CredentialScope
from .signing import ALGORITHM, build_string_to_sign, compute_signature

logger = logging.getLogger(__name__)

X_AMZ_DATE = "X-Amz-Date"
DEFAULT_REGION = "us-east-1"
S3 = "s3"
GLACIER = "glacier"


class SignatureType(enum.Enum):
    AUTH_HEADER = "auth-header"
    QUERY_STRING = "query-string"


@dataclass(frozen=True)
class Signer:
    signature_type: SignatureType
    http_request: HttpRequest
    canonical_request: CanonicalRequest
    credentials: AwsCredentials
    date: str
    scope: CredentialScope

    @property
    def string_to_sign(self) -> str:
        string_to_sign = build_string_to_sign(
            self.date, self.scope.get(), self.canonical_request.get()
        )
        logger.debug("StringToSign:\n%s", string_to_sign)
        return string_to_sign

    @property
    def signature(self) -> str:
        """The bare hex signature, without any presentation."""
        return compute_signature(
            self.credentials.secret_key, self.scope, self.string_to_sign
        )

    def get_signature(self) -> str:
        match self.signature_type:
            case SignatureType.AUTH_HEADER:
                return (
                    f"{ALGORITHM} "
                    f"Credential={self.credentials.access_key}/{self.scope.get()}, "
                    f"SignedHeaders={self.canonical_request.headers.get_names()}, "
                    f"Signature={self.signature}"
                )
            case SignatureType.QUERY_STRING:
                return f"{self.http_request.raw_query}&X-Amz-Signature={self.signature}"


@dataclass(frozen=True)
class SignerConfig:
    """Options shared by both signing modes.

    ``credentials`` wins over ``credentials_provider``; with neither, the
    default provider chain is consulted on every build.
    """

    credentials: AwsCredentials | None = None
    credentials_provider: CredentialsProvider | None = None
    region: str = DEFAULT_REGION
    headers: tuple[Header, ...] = ()

    def with_header(self, name: str, value: str) -> Self:
        return self.with_headers(Header(name, value))

    def with_headers(self, *headers: Header) -> Self:
        return dataclasses.replace(self, headers=self.headers + headers)

    def resolve_credentials(self) -> AwsCredentials:
        if self.credentials is not None:
            return self.credentials
        provider = self.credentials_provider or CredentialsProviderChain()
        return provider.resolve()

    def canonical_headers(self) -> CanonicalHeaders:
        return CanonicalHeaders.from_headers(self.headers)


def _date_without_timestamp(date: str) -> str:
    return date[:8]


def build_auth_header(
    config: SignerConfig,
    request: HttpRequest,
    service: str,
    content_sha256: str,
) -> Signer:
    canonical_headers = config.canonical_headers()
    date = canonical_headers.get_first_value(X_AMZ_DATE)
    if date is None:
        raise SigningError(f"headers missing '{X_AMZ_DATE}' header")

    credentials = config.resolve_credentials()
    canonical_request = CanonicalRequest(
        service, request, canonical_headers, content_sha256
    )
    scope = CredentialScope(_date_without_timestamp(date), service, config.region)
    return Signer(
        SignatureType.AUTH_HEADER, request, canonical_request, credentials, date, scope
    )


def build_query_string(
    config: SignerConfig,
    request: HttpRequest,
    service: str,
    content_sha256: str,
    date: str,
    expires_seconds: int,
) -> Signer:
    canonical_headers = config.canonical_headers()
    credentials = config.resolve_credentials()
    scope = CredentialScope(_date_without_timestamp(date), service, config.region)

    access_key = urllib.parse.quote(credentials.access_key, safe="")
    params = [
        f"X-Amz-Algorithm={ALGORITHM}",
        f"X-Amz-Credential={access_key}/{scope.get()}",
        f"X-Amz-Date={date}",
        f"X-Amz-Expires={expires_seconds}",
        f"X-Amz-SignedHeaders={canonical_headers.get_names()}",
    ]
    if request.raw_query is not None:
        params.insert(0, request.raw_query)

    request = request.with_query("&".join(params))
    canonical_request = CanonicalRequest(
        service, request, canonical_headers, content_sha256
    )
    return Signer(
        SignatureType.QUERY_STRING, request, canonical_request, credentials, date, scope
    )


def _warn_deprecated(name: str) -> None:
    warnings.warn(
        f"{name}() is deprecated, use build_auth_header() instead",
        DeprecationWarning,
        stacklevel=3,
    )


def build(
    config: SignerConfig, request: HttpRequest, service: str, content_sha256: str
) -> Signer:
    _warn_deprecated("build")
    return build_auth_header(config, request, service, content_sha256)


def build_s3(config: SignerConfig, request: HttpRequest, content_sha256: str) -> Signer:
    _warn_deprecated("build_s3")
    return build_auth_header(config, request, S3, content_sha256)


def build_glacier(
    config: SignerConfig, request: HttpRequest, content_sha256: str
) -> Signer:
    _warn_deprecated("build_glacier")
    return build_auth_header(config, request, GLACIER, content_sha256)
