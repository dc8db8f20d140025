"""HTTP response model and serializer."""

from dataclasses import dataclass

from config import BODY_ENCODING, HEAD_ENCODING, HTTP_VERSION

REASON_PHRASES: dict[int, str] = {
    100: "Continue",
    200: "OK",
    201: "Created",
    202: "Accepted",
    204: "No Content",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    408: "Request Timeout",
    409: "Conflict",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    431: "Request Header Fields Too Large",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    505: "HTTP Version Not Supported",
}


def split_header(line: str) -> tuple[str, str]:
    """Split a ``Name: Value`` header line into its name and value."""
    name, separator, value = line.partition(":")
    if not separator or not name.strip() or "\r" in line or "\n" in line:
        raise ValueError(f"Invalid header line: {line!r}")
    return name.strip(), value.strip()


def header_matches(line: str, name: str) -> bool:
    header_name, _value = split_header(line)
    return header_name.lower() == name.strip().lower()


@dataclass(frozen=True, slots=True)
class HTTPResponse:
    status_code: int
    reason_phrase: str | None = None
    headers: tuple[str, ...] = ()
    body: bytes | str = b""

    def __post_init__(self) -> None:
        if isinstance(self.body, str):
            object.__setattr__(self, "body", self.body.encode(BODY_ENCODING))
        if not isinstance(self.headers, tuple):
            object.__setattr__(self, "headers", tuple(self.headers))
        for line in self.headers:
            split_header(line)

    @property
    def status_line(self) -> str:
        reason = self.reason_phrase or REASON_PHRASES.get(self.status_code, "Unknown")
        return f"{HTTP_VERSION} {self.status_code} {reason}"

    def header(self, name: str) -> str | None:
        """Return the first value of the named header, or None when absent."""
        for line in self.headers:
            if header_matches(line, name):
                return split_header(line)[1]
        return None

    def to_bytes(self) -> bytes:
        """Serialize the response into HTTP/1.1 wire format bytes."""
        head_lines = [self.status_line, *self.headers]
        head = "\r\n".join(head_lines).encode(HEAD_ENCODING) + b"\r\n\r\n"
        return head + self.body


def empty_response() -> HTTPResponse:
    """A response with nothing in it: 204, no headers, no body."""
    return HTTPResponse(status_code=204)


def print_response(response: HTTPResponse) -> str:
    return response.to_bytes().decode(HEAD_ENCODING)
