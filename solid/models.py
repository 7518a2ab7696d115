from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class RawResponseLike(Protocol):
    """
    What a transport must hand over for a response to be interpreted:
    a status code, the effective URL, the body and case-insensitive
    header lookup.
    """

    status_code: int
    url: str

    @property
    def content(self) -> bytes: ...

    def get_header(self, name: str) -> str | None: ...


class RawResponse:
    """
    Fully received HTTP response, copied out of whatever transport fetched it.
    Repeated header names keep the last value.
    """

    def __init__(
        self,
        status_code: int,
        headers: Iterable[tuple[str, str]],
        body: bytes = b"",
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        self._body = body
        self._headers = {name.lower(): value for name, value in headers}

    def get_header(self, name: str) -> str | None:
        return self._headers.get(name.lower())

    @property
    def content(self) -> bytes:
        return self._body

    def __repr__(self) -> str:
        return f"<RawResponse [{self.status_code}] {self.url or '-'}>"
