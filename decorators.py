"""Response decorators: pure functions deriving a new response from an old one."""

from dataclasses import replace

from config import BODY_ENCODING, CONTENT_LENGTH_HEADER
from response import HTTPResponse, header_matches, split_header


def with_status(
    response: HTTPResponse,
    status_code: int,
    reason_phrase: str | None = None,
) -> HTTPResponse:
    if not 100 <= status_code <= 599:
        raise ValueError(f"Invalid status code: {status_code}")
    return replace(response, status_code=status_code, reason_phrase=reason_phrase)


def with_body(response: HTTPResponse, body: bytes | str) -> HTTPResponse:
    """Replace the body and keep Content-Length in step with it."""
    if isinstance(body, str):
        body = body.encode(BODY_ENCODING)
    sized = replace_header(response, CONTENT_LENGTH_HEADER, str(len(body)))
    return replace(sized, body=body)


def with_header(response: HTTPResponse, name: str, value: str) -> HTTPResponse:
    return with_headers(response, f"{name}: {value}")


def with_headers(response: HTTPResponse, *lines: str) -> HTTPResponse:
    for line in lines:
        split_header(line)
    return replace(response, headers=response.headers + tuple(lines))


def without_header(response: HTTPResponse, name: str) -> HTTPResponse:
    kept = tuple(line for line in response.headers if not header_matches(line, name))
    return replace(response, headers=kept)


def replace_header(response: HTTPResponse, name: str, value: str) -> HTTPResponse:
    """Set a header, rewriting the first matching line where it stands.

    Later lines with the same name are dropped. When nothing matches, the
    header is appended after the existing ones.
    """
    new_line = f"{name}: {value}"
    headers: list[str] = []
    replaced = False
    for line in response.headers:
        if not header_matches(line, name):
            headers.append(line)
        elif not replaced:
            headers.append(new_line)
            replaced = True
    if not replaced:
        headers.append(new_line)
    return replace(response, headers=tuple(headers))
