"""Pytest configuration and fixtures."""

import pytest
from solid.models import RawResponse


@pytest.fixture
def make_response():
    """Factory for RawResponse objects with sensible defaults."""

    def _make(status_code=200, headers=None, body=b"", url="https://example.org/doc"):
        return RawResponse(
            status_code=status_code,
            headers=headers or [],
            body=body,
            url=url,
        )

    return _make


@pytest.fixture
def ldp_response(make_response):
    """A typical response for an LDP resource."""
    return make_response(
        headers=[
            ("Content-Type", "text/turtle"),
            (
                "Link",
                '<https://example.org/doc.acl>; rel="acl", '
                '<https://example.org/doc.meta>; rel="describedBy", '
                '<http://www.w3.org/ns/ldp#Resource>; rel="type"',
            ),
            ("Allow", "OPTIONS, HEAD, GET, PATCH, POST, PUT, DELETE"),
            ("Accept-Patch", "application/sparql-update"),
            ("User", "https://alice.example.org/profile/card#me"),
            ("Updates-Via", "wss://example.org"),
        ],
        body=b"<#this> a <#Thing> .",
    )


@pytest.fixture
def transport_response(mocker):
    """Duck-typed response from some other transport (httpx, requests, ...)."""

    def _make(status_code=200, headers=None, body=b"", url="https://example.org/doc"):
        lowered = {k.lower(): v for k, v in (headers or {}).items()}
        resp = mocker.Mock()
        resp.status_code = status_code
        resp.url = url
        resp.content = body
        resp.get_header.side_effect = lambda name: lowered.get(name.lower())
        return resp

    return _make
