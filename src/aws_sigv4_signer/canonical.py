import dataclasses
import logging
from dataclasses import dataclass
from typing import Self

from yarl import URL

from .headers import CanonicalHeaders

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpRequest:
    """Method, path and query exactly as they go on the wire.

    Path and query must already be percent-encoded; they are signed verbatim.
    """

    method: str
    raw_path: str
    raw_query: str | None = None

    @classmethod
    def from_url(cls, method: str, url: URL | str) -> Self:
        if isinstance(url, str):
            url = URL(url, encoded=True)
        return cls(method, url.raw_path, url.raw_query_string or None)

    def with_query(self, raw_query: str | None) -> Self:
        return dataclasses.replace(self, raw_query=raw_query)


class CanonicalRequest:
    def __init__(
        self,
        service: str,
        request: HttpRequest,
        headers: CanonicalHeaders,
        content_sha256: str,
    ):
        self.service = service
        self.request = request
        self.headers = headers
        self.content_sha256 = content_sha256

        # The query string is used as given, neither sorted nor re-encoded.
        # The path is too, except that an empty path is signed as "/".
        self._canonical_request = "\n".join(
            [
                request.method,
                request.raw_path or "/",
                request.raw_query or "",
                headers.get(),
                headers.get_names(),
                content_sha256,
            ]
        )
        logger.debug("CanonicalRequest:\n%s", self._canonical_request)

    def get(self) -> str:
        return self._canonical_request

    def __str__(self) -> str:
        return self._canonical_request
