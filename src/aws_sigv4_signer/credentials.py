"""AWS credentials and the providers that resolve them."""

import configparser
import logging
import os
import pathlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from .exceptions import CredentialsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AwsCredentials:
    access_key: str
    secret_key: str = field(repr=False)


class CredentialsProvider(Protocol):
    def resolve(self) -> AwsCredentials: ...


class StaticCredentialsProvider:
    def __init__(self, credentials: AwsCredentials):
        self.credentials = credentials

    def resolve(self) -> AwsCredentials:
        return self.credentials


class EnvironmentCredentialsProvider:
    ACCESS_KEY_VARS = ("AWS_ACCESS_KEY_ID", "AWS_ACCESS_KEY")
    SECRET_KEY_VARS = ("AWS_SECRET_ACCESS_KEY", "AWS_SECRET_KEY")

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = os.environ if environ is None else environ

    def _first(self, names: tuple[str, ...]) -> str | None:
        for name in names:
            if value := self._environ.get(name, "").strip():
                return value
        return None

    def resolve(self) -> AwsCredentials:
        access_key = self._first(self.ACCESS_KEY_VARS)
        secret_key = self._first(self.SECRET_KEY_VARS)
        if not access_key or not secret_key:
            raise CredentialsError(
                "Unable to load AWS credentials from environment variables "
                f"({self.ACCESS_KEY_VARS[0]} and {self.SECRET_KEY_VARS[0]})"
            )
        return AwsCredentials(access_key, secret_key)


class ProfileCredentialsProvider:
    """Reads a profile from the shared AWS credentials and config files.

    The credentials file takes precedence over the config file. Paths and the
    profile name default to the usual AWS environment variables.
    """

    def __init__(
        self,
        profile_name: str | None = None,
        credentials_path: str | pathlib.Path | None = None,
        config_path: str | pathlib.Path | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        environ = os.environ if environ is None else environ
        aws_dir = pathlib.Path.home() / ".aws"

        self.profile_name = profile_name or environ.get("AWS_PROFILE") or "default"

        if credentials_path is None:
            credentials_path = environ.get(
                "AWS_SHARED_CREDENTIALS_FILE", aws_dir / "credentials"
            )
        self.credentials_path = pathlib.Path(credentials_path).expanduser()

        if config_path is None:
            config_path = environ.get("AWS_CONFIG_FILE", aws_dir / "config")
        self.config_path = pathlib.Path(config_path).expanduser()

    def _read_section(self, path: pathlib.Path, section: str) -> dict[str, str]:
        if not path.exists():
            return {}
        parser = configparser.ConfigParser()
        try:
            parser.read(path)
        except configparser.Error as e:
            raise CredentialsError(f"Unable to parse AWS file '{path}'") from e
        if section not in parser:
            return {}
        return dict(parser[section])

    def resolve(self) -> AwsCredentials:
        credentials_data = self._read_section(self.credentials_path, self.profile_name)
        # AWS config uses "profile <name>" except for default
        config_section = (
            self.profile_name
            if self.profile_name == "default"
            else f"profile {self.profile_name}"
        )
        config_data = self._read_section(self.config_path, config_section)

        access_key = credentials_data.get("aws_access_key_id") or config_data.get(
            "aws_access_key_id"
        )
        secret_key = credentials_data.get("aws_secret_access_key") or config_data.get(
            "aws_secret_access_key"
        )

        if not access_key:
            raise CredentialsError(
                f"aws_access_key_id not found for profile '{self.profile_name}' "
                f"in config or credentials files"
            )
        if not secret_key:
            raise CredentialsError(
                f"aws_secret_access_key not found for profile '{self.profile_name}' "
                f"in config or credentials files"
            )
        return AwsCredentials(access_key, secret_key)


class CredentialsProviderChain:
    """Asks each provider in turn; the first that resolves wins."""

    def __init__(self, *providers: CredentialsProvider):
        if not providers:
            providers = (EnvironmentCredentialsProvider(), ProfileCredentialsProvider())
        self.providers = providers

    def resolve(self) -> AwsCredentials:
        errors = []
        for provider in self.providers:
            try:
                credentials = provider.resolve()
            except CredentialsError as e:
                errors.append(str(e))
                continue
            logger.debug("Resolved credentials with %s", type(provider).__name__)
            return credentials

        raise CredentialsError(
            "Unable to load AWS credentials from any provider in the chain: "
            + "; ".join(errors)
        )
