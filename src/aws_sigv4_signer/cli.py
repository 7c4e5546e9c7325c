#!/usr/bin/env python3
"""Command line interface for signing requests with AWS SigV4."""

import datetime as dt
import logging
import sys

import click
from yarl import URL

from .canonical import HttpRequest
from .credentials import CredentialsProviderChain, ProfileCredentialsProvider
from .exceptions import SigningError
from .headers import Header
from .signer import (
    DEFAULT_REGION,
    X_AMZ_DATE,
    SignerConfig,
    build_auth_header,
    build_query_string,
)
from .signing import EMPTY_SHA256, UNSIGNED_PAYLOAD, sha256_hex


def _parse_header(ctx, param, values):
    headers = []
    for value in values:
        name, sep, header_value = value.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected 'Name: value', got {value!r}")
        headers.append(Header(name.strip(), header_value))
    return tuple(headers)


def _host_header(url: URL) -> Header:
    host = url.raw_host or ""
    if ":" in host and not host.startswith("["):
        # IPv6 literal
        host = f"[{host}]"
    if not url.is_default_port():
        host = f"{host}:{url.port}"
    return Header("Host", host)


def _timestamp(date: str | None) -> str:
    if date:
        return date
    return dt.datetime.now(dt.UTC).strftime("%Y%m%dT%H%M%SZ")


def _content_sha256(payload, content_sha256: str | None, default: str) -> str:
    if payload is not None:
        return sha256_hex(payload.read())
    return content_sha256 or default


def _config_with_request_headers(
    config: SignerConfig, url: URL, headers: tuple[Header, ...]
) -> SignerConfig:
    config = config.with_headers(*headers)
    if "host" not in config.canonical_headers():
        config = config.with_headers(_host_header(url))
    return config


def _fail(error: Exception):
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


common_options = [
    click.argument("method"),
    click.argument("url"),
    click.option("--service", required=True, help="Service name, e.g. s3"),
    click.option(
        "-H",
        "--header",
        "headers",
        multiple=True,
        callback=_parse_header,
        help="Extra header to sign, as 'Name: value'",
    ),
    click.option("--date", help="Timestamp in YYYYMMDDThhmmssZ format (default: now)"),
    click.option("--payload", type=click.File("rb"), help="File holding the body"),
    click.option("--content-sha256", help="Hex SHA-256 of the body"),
]


def with_common_options(func):
    for option in reversed(common_options):
        func = option(func)
    return func


@click.group()
@click.option("--profile", envvar="AWS_PROFILE", help="AWS profile to read")
@click.option(
    "--region",
    envvar="AWS_DEFAULT_REGION",
    default=DEFAULT_REGION,
    show_default=True,
    help="AWS region",
)
@click.option("-v", "--verbose", is_flag=True, help="Log signing steps to stderr")
@click.pass_context
def cli(ctx, profile, region, verbose):
    """SigV4 - sign HTTP requests for AWS services."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    provider = (
        ProfileCredentialsProvider(profile) if profile else CredentialsProviderChain()
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = SignerConfig(credentials_provider=provider, region=region)


@cli.command()
@with_common_options
@click.pass_context
def header(ctx, method, url, service, headers, date, payload, content_sha256):
    """Print the Authorization header value for a request."""
    url = URL(url, encoded=True)
    config = _config_with_request_headers(ctx.obj["config"], url, headers)
    if X_AMZ_DATE not in config.canonical_headers():
        config = config.with_header(X_AMZ_DATE, _timestamp(date))

    sha256 = _content_sha256(payload, content_sha256, EMPTY_SHA256)
    request = HttpRequest.from_url(method.upper(), url)
    try:
        signer = build_auth_header(config, request, service, sha256)
        click.echo(signer.get_signature())
    except SigningError as e:
        _fail(e)


@cli.command()
@with_common_options
@click.option(
    "--expires-in", default=3600, show_default=True, help="Lifetime in seconds"
)
@click.pass_context
def presign(
    ctx, method, url, service, headers, date, payload, content_sha256, expires_in
):
    """Print a pre-signed URL for a request."""
    url = URL(url, encoded=True)
    config = _config_with_request_headers(ctx.obj["config"], url, headers)

    sha256 = _content_sha256(payload, content_sha256, UNSIGNED_PAYLOAD)
    request = HttpRequest.from_url(method.upper(), url)
    try:
        signer = build_query_string(
            config, request, service, sha256, _timestamp(date), expires_in
        )
        click.echo(f"{url.origin()}{url.raw_path}?{signer.get_signature()}")
    except SigningError as e:
        _fail(e)


if __name__ == "__main__":
    cli()
