"""AWS Signature Version 4 request signing."""

__version__ = "0.1.0"

from .canonical import CanonicalRequest, HttpRequest
from .credentials import (
    AwsCredentials,
    CredentialsProvider,
    CredentialsProviderChain,
    EnvironmentCredentialsProvider,
    ProfileCredentialsProvider,
    StaticCredentialsProvider,
)
from .exceptions import CredentialsError, SigningError
from .headers import CanonicalHeaders, Header
from .scope import CredentialScope
from .signer import (
    SignatureType,
    Signer,
    SignerConfig,
    build,
    build_auth_header,
    build_glacier,
    build_query_string,
    build_s3,
)
from .signing import EMPTY_SHA256, UNSIGNED_PAYLOAD

__all__ = [
    "AwsCredentials",
    "CanonicalHeaders",
    "CanonicalRequest",
    "CredentialScope",
    "CredentialsError",
    "CredentialsProvider",
    "CredentialsProviderChain",
    "EMPTY_SHA256",
    "EnvironmentCredentialsProvider",
    "Header",
    "HttpRequest",
    "ProfileCredentialsProvider",
    "SignatureType",
    "Signer",
    "SignerConfig",
    "SigningError",
    "StaticCredentialsProvider",
    "UNSIGNED_PAYLOAD",
    "build",
    "build_auth_header",
    "build_glacier",
    "build_query_string",
    "build_s3",
]
