from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from solid.errors import HTTPStatusError, ResourceNotFoundError
from solid.headers import parse_allowed_methods, parse_link_header
from solid.models import RawResponseLike

logger = logging.getLogger("solid.response")

LDP = "http://www.w3.org/ns/ldp#"
LDP_CONTAINER_TYPES = frozenset(
    LDP + name
    for name in ("Container", "BasicContainer", "DirectContainer", "IndirectContainer")
)

# Statuses in [EXISTS_MIN, EXISTS_MAX) mean the resource exists.
EXISTS_MIN = 200
EXISTS_MAX = 400

_EMPTY: Mapping = MappingProxyType({})


class ResponseView:
    """
    Read-only interpretation of one HTTP response from a Solid/LDP server.

    Everything is derived eagerly at construction: the parsed ``Link``
    relations, the ``.acl`` and ``.meta`` resource locations, the LDP type,
    the verbs the server allows, the resource URL, the authenticated user
    and the websocket endpoint. Construction never raises; missing headers
    degrade to empty defaults.

    A falsy ``raw`` (no response received at all) yields the null view:
    ``method`` is None, ``user`` is ``''`` and every map is empty.

    Args:
        raw: Fully received response from the transport, or None.
        method: HTTP verb of the original request.
    """

    def __init__(self, raw: RawResponseLike | None, method: str | None = None) -> None:
        self._xhr = raw or None
        self._link_headers: Mapping[str, str] = _EMPTY
        self._allowed_methods: Mapping[str, bool] = _EMPTY
        self._acl: str | None = None
        self._meta: str | None = None
        self._type: str | None = None
        self._url: str | None = None
        self._user = ""
        self._websocket = ""
        if not raw:
            self._method: str | None = None
            logger.debug("Building null response view (method=%r)", method)
            return

        self._method = method.lower() if method else ""
        links = parse_link_header(raw.get_header("Link"))
        self._link_headers = MappingProxyType(links)
        self._acl = links.get("acl")
        self._meta = links.get("meta") or links.get("describedBy")
        self._type = links.get("type")
        if self._method == "get":
            # A plain read is not a preflight request.
            self._allowed_methods = _EMPTY
        else:
            self._allowed_methods = MappingProxyType(
                parse_allowed_methods(raw.get_header("Allow"), raw.get_header("Accept-Patch"))
            )
        self._url = raw.get_header("Location") or raw.url
        self._user = raw.get_header("User") or ""
        self._websocket = raw.get_header("Updates-Via") or ""

    @property
    def method(self) -> str | None:
        """Lower-cased verb of the original request; None for the null view."""
        return self._method

    @property
    def link_headers(self) -> Mapping[str, str]:
        """Parsed ``Link`` relations, e.g. ``{"acl": "doc.acl", "type": "...#Resource"}``."""
        return self._link_headers

    @property
    def acl(self) -> str | None:
        return self._acl

    @property
    def meta(self) -> str | None:
        """Location of the description resource (``meta``, else ``describedBy``)."""
        return self._meta

    @property
    def type(self) -> str | None:
        return self._type

    @property
    def allowed_methods(self) -> Mapping[str, bool]:
        """
        Verbs the server asserted as allowed, e.g. ``{"get": True, "put": True}``.
        Always empty when the original request was a GET.
        """
        return self._allowed_methods

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def user(self) -> str:
        """WebID of the authenticated user, ``''`` when anonymous."""
        return self._user

    @property
    def websocket(self) -> str:
        return self._websocket

    @property
    def xhr(self) -> RawResponseLike | None:
        return self._xhr

    @property
    def status_code(self) -> int | None:
        if self._xhr is None:
            return None
        return self._xhr.status_code

    def content_type(self) -> str | None:
        if self._xhr is None:
            return None
        return self._xhr.get_header("Content-Type")

    def exists(self) -> bool:
        """True if a response was received with a status in [200, 400)."""
        if self._xhr is None:
            return False
        return EXISTS_MIN <= self._xhr.status_code < EXISTS_MAX

    def is_logged_in(self) -> bool:
        return bool(self._user)

    def is_container(self) -> bool:
        return self._type in LDP_CONTAINER_TYPES

    def raw(self) -> bytes | None:
        """Body of the underlying response, or None if there was none."""
        if self._xhr is None:
            return None
        return self._xhr.content

    def raise_for_status(self) -> None:
        """
        Raise if the resource does not exist.

        This is the one call on a view that raises, and only when a caller
        asks for it. Construction and every other query never raise.

        Raises:
            ResourceNotFoundError: No response was received, or the status
                was 404 or 410.
            HTTPStatusError: Any other status outside [200, 400).
        """
        if self._xhr is None:
            raise ResourceNotFoundError("No response received")
        if self.exists():
            return
        status = self._xhr.status_code
        message = f"{status} response for {self._url}"
        if status in (404, 410):
            raise ResourceNotFoundError(message, status_code=status, url=self._url)
        raise HTTPStatusError(message, status_code=status, url=self._url)

    def __repr__(self) -> str:
        if self._xhr is None:
            return "<ResponseView [no response]>"
        verb = (self._method or "?").upper()
        return f"<ResponseView [{verb} {self._xhr.status_code}] {self._url}>"


def new_response_view(raw: RawResponseLike | None, method: str | None = None) -> ResponseView:
    """Interpret ``raw`` as the answer to a ``method`` request."""
    return ResponseView(raw, method)
