from solid.response import ResponseView, new_response_view
from solid.models import RawResponse, RawResponseLike
from solid.headers import parse_link_header, parse_allowed_methods
from solid.errors import SolidError, HTTPStatusError, ResourceNotFoundError

__all__ = [
    "ResponseView",
    "new_response_view",
    "RawResponse",
    "RawResponseLike",
    "parse_link_header",
    "parse_allowed_methods",
    "SolidError",
    "HTTPStatusError",
    "ResourceNotFoundError",
]
