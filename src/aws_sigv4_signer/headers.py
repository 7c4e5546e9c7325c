"""Canonical form of the headers taking part in a signature."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class Header:
    name: str
    value: str


def _normalize_name(name: str) -> str:
    return name.strip().lower()


def _normalize_value(value: str) -> str:
    return _WHITESPACE_RUN.sub(" ", value.strip())


class CanonicalHeaders:
    """Headers keyed by lower-cased name, rendered in AWS canonical form.

    Values of a repeated header are sorted and joined with a comma, so the
    order headers were added in never matters. Lookup is case-insensitive.
    """

    def __init__(self, values: dict[str, list[str]]):
        self._values = {name: tuple(sorted(vals)) for name, vals in values.items()}

    @classmethod
    def builder(cls) -> "CanonicalHeadersBuilder":
        return CanonicalHeadersBuilder()

    @classmethod
    def from_headers(cls, headers: Iterable[Header]) -> Self:
        values: dict[str, list[str]] = {}
        for header in headers:
            values.setdefault(_normalize_name(header.name), []).append(
                _normalize_value(header.value)
            )
        return cls(values)

    def get(self) -> str:
        return "".join(
            f"{name}:{','.join(self._values[name])}\n" for name in sorted(self._values)
        )

    def get_names(self) -> str:
        return ";".join(sorted(self._values))

    def get_first_value(self, name: str) -> str | None:
        values = self._values.get(_normalize_name(name))
        return values[0] if values else None

    def __contains__(self, name: str) -> bool:
        return _normalize_name(name) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalHeaders):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"CanonicalHeaders({self.get_names()!r})"


class CanonicalHeadersBuilder:
    def __init__(self):
        self._headers: list[Header] = []

    def add(self, name: str, value: str) -> Self:
        self._headers.append(Header(name, value))
        return self

    def build(self) -> CanonicalHeaders:
        return CanonicalHeaders.from_headers(self._headers)
