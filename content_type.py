"""Content-Type decorator and presets for the common MIME types."""

import codecs
import logging
import re
from collections.abc import Callable

from config import CONTENT_TYPE_HEADER
from decorators import replace_header
from response import HTTPResponse

logger = logging.getLogger(__name__)

HTML = "text/html"
JSON = "application/json"
XML = "text/xml"
TEXT = "text/plain"

_TOKEN = r"[A-Za-z0-9!#$%&'*+.^_`|~-]+"
_QUOTED = r'"(?:[^"\\\x00-\x1f\x7f]|\\[\t\x20-\x7e])*"'
MIME_TYPE_PATTERN = re.compile(
    rf"{_TOKEN}/{_TOKEN}(?:[ \t]*;[ \t]*{_TOKEN}=(?:{_TOKEN}|{_QUOTED}))*"
)
CHARSET_PATTERN = re.compile(_TOKEN)


class ContentTypeError(ValueError):
    """Rejected MIME type or charset, carrying the offending value."""

    def __init__(self, message: str, *, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


def _check_mime_type(mime_type: str) -> None:
    if not mime_type or not mime_type.strip():
        raise ContentTypeError("MIME type must not be empty", value=mime_type)
    if not MIME_TYPE_PATTERN.fullmatch(mime_type):
        raise ContentTypeError(f"Invalid MIME type: {mime_type!r}", value=mime_type)


def _check_charset(charset: str) -> None:
    # codecs.lookup folds punctuation and whitespace, so the raw name is checked first
    if not CHARSET_PATTERN.fullmatch(charset):
        raise ContentTypeError(f"Invalid charset: {charset!r}", value=charset)
    try:
        codecs.lookup(charset)
    except LookupError as exc:
        raise ContentTypeError(f"Unknown charset: {charset!r}", value=charset) from exc


def with_type(
    response: HTTPResponse,
    mime_type: str,
    charset: str | None = None,
) -> HTTPResponse:
    """Return ``response`` with its Content-Type set to ``mime_type``.

    An existing Content-Type line is rewritten in place, otherwise one is
    appended. With ``charset`` the value becomes ``<mime_type>; charset=<charset>``
    and the charset keeps the caller's spelling. Status line, body and all
    other header lines are left untouched.
    """
    _check_mime_type(mime_type)
    value = mime_type
    if charset is not None:
        _check_charset(charset)
        value = f"{mime_type}; charset={charset}"

    previous = response.header(CONTENT_TYPE_HEADER)
    if previous is None:
        logger.debug("Appending Content-Type %r", value)
    else:
        logger.debug("Replacing Content-Type %r with %r", previous, value)
    return replace_header(response, CONTENT_TYPE_HEADER, value)


def _preset(mime_type: str) -> Callable[..., HTTPResponse]:
    def typed(response: HTTPResponse, charset: str | None = None) -> HTTPResponse:
        return with_type(response, mime_type, charset)

    typed.__doc__ = f"Set Content-Type to {mime_type}, optionally with a charset."
    return typed


html = _preset(HTML)
json = _preset(JSON)
xml = _preset(XML)
text = _preset(TEXT)

PRESETS: dict[str, Callable[..., HTTPResponse]] = {
    "html": html,
    "json": json,
    "xml": xml,
    "text": text,
}


def content_type(response: HTTPResponse) -> str | None:
    return response.header(CONTENT_TYPE_HEADER)


def mime_type_of(response: HTTPResponse) -> str | None:
    """Bare MIME type of the response, parameters stripped and lower-cased."""
    value = content_type(response)
    if value is None:
        return None
    return value.split(";", 1)[0].strip().lower() or None
