import pytest

from aws_sigv4_signer.exceptions import CredentialsError, SigningError


def test_signing_error():
    error = SigningError("Test error")
    assert str(error) == "Test error"
    assert error.message == "Test error"


def test_signing_error_includes_cause():
    with pytest.raises(SigningError) as excinfo:
        try:
            raise ValueError("bad key")
        except ValueError as e:
            raise SigningError("Error signing request") from e

    assert str(excinfo.value) == "Error signing request: bad key"
    assert excinfo.value.message == "Error signing request"


def test_credentials_error():
    error = CredentialsError()
    assert isinstance(error, SigningError)
    assert str(error) == "Unable to resolve AWS credentials"
